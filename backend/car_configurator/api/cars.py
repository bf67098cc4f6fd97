from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from typing import List
import logging

from ..core.database import get_db
from ..models.car_model import CarModel
from ..schemas.car_schema import Car, CarBase, CarCreate, CarDetail, CarSummary, CarUpdate, Message
from ..utils.validation import validate_car_form

router = APIRouter()

UNEXPECTED_ERROR = "An unexpected error occurred."


def _not_found(car_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Car with ID {car_id} not found.")


def _check_form(car: CarBase) -> None:
    """Applies the same field rules the create/edit forms use."""
    errors = validate_car_form(car.model_dump())
    if errors:
        raise HTTPException(status_code=400, detail=" ".join(errors.values()))


# ===== CAR CRUD =====

@router.get("", response_model=List[CarSummary])
def get_all_cars(db: Session = Depends(get_db)):
    """Get all car models, ordered by name"""
    try:
        return db.query(CarModel).order_by(CarModel.name.asc()).all()
    except SQLAlchemyError as e:
        logging.error(f"Error fetching all cars: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR)


@router.get("/{car_id}", response_model=CarDetail)
def get_car_by_id(car_id: int, db: Session = Depends(get_db)):
    """Get a car model with the customizations available for it"""
    try:
        db_car = db.query(CarModel).options(
            selectinload(CarModel.customizations)
        ).filter(CarModel.id == car_id).first()
        if db_car is None:
            raise _not_found(car_id)

        return db_car
    except SQLAlchemyError as e:
        logging.error(f"Error fetching car with ID {car_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR)


@router.post("", response_model=Car, status_code=201)
def create_car(car: CarCreate, db: Session = Depends(get_db)):
    """Add a new car model"""
    _check_form(car)
    logging.info(f"Creating car: {car.name} ({car.year})")

    db_car = CarModel(**car.model_dump())
    db.add(db_car)

    try:
        db.commit()
        db.refresh(db_car)
        logging.info(f"Car created successfully: {db_car.id}")
        return db_car
    except SQLAlchemyError as e:
        logging.error(f"Error creating car: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR)


@router.put("/{car_id}", response_model=Car)
def update_car_by_id(car_id: int, car_update: CarUpdate, db: Session = Depends(get_db)):
    """Replace the fields of an existing car model"""
    _check_form(car_update)

    try:
        db_car = db.query(CarModel).filter(CarModel.id == car_id).first()
        if db_car is None:
            raise _not_found(car_id)

        for field, value in car_update.model_dump().items():
            setattr(db_car, field, value)

        db.commit()
        db.refresh(db_car)
        logging.info(f"Car {car_id} updated successfully")
        return db_car
    except SQLAlchemyError as e:
        logging.error(f"Error updating car with ID {car_id}: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR)


@router.delete("/{car_id}", response_model=Message)
def delete_car_by_id(car_id: int, db: Session = Depends(get_db)):
    """Remove a car model; its option links go with it"""
    try:
        db_car = db.query(CarModel).filter(CarModel.id == car_id).first()
        if db_car is None:
            raise _not_found(car_id)

        db.delete(db_car)
        db.commit()
        logging.info(f"Car {car_id} deleted")
        return {"message": f"Successfully deleted car with ID {car_id}."}
    except SQLAlchemyError as e:
        logging.error(f"Error deleting car with ID {car_id}: {e}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail=UNEXPECTED_ERROR)
