from sqlalchemy import Column, Integer, String, Numeric, Text
from sqlalchemy.orm import relationship
from ..core.database import Base
from .customization_model import Customization, model_customizations


class CarModel(Base):
    __tablename__ = "models"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    base_price = Column(Numeric(12, 2), nullable=False)
    description = Column(Text)
    image_url = Column(String(255))

    # Deleting a model drops its rows from the join table, never the options themselves
    customizations = relationship(
        Customization,
        secondary=model_customizations,
        order_by=[Customization.category, Customization.id],
    )

    @property
    def available_customizations(self):
        return self.customizations
