from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Table
from ..core.database import Base

# Join table: which options are offered for which model
model_customizations = Table(
    "model_customizations",
    Base.metadata,
    Column("model_id", Integer, ForeignKey("models.id", ondelete="CASCADE"), primary_key=True),
    Column("customization_id", Integer, ForeignKey("customizations.id", ondelete="CASCADE"), primary_key=True),
)


class Customization(Base):
    """
    A purchasable option (paint, wheels, trim) that can be attached to one or more models
    """
    __tablename__ = "customizations"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(50), nullable=False)  # Exterior Color, Wheel Style, Interior Trim
    option_name = Column(String(100), nullable=False)
    price_adjustment = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String(255))
