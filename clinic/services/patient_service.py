from sqlalchemy.orm import Session
from typing import List

from ..models.patient import Patient
from ..core.errors import NotFoundError
from ..schemas.patient import PatientCreate, PatientUpdate

class PatientService:
    def __init__(self, db: Session):
        self.db = db
    
    def list_patients(self) -> List[Patient]:
        return self.db.query(Patient).order_by(Patient.last_name, Patient.first_name, Patient.id).all()
    
    def get_patient(self, patient_id: int) -> Patient:
        patient = self.db.query(Patient).filter(Patient.id == patient_id).first()
        if not patient:
            raise NotFoundError("Patient", patient_id)
        return patient
    
    def create_patient(self, patient_data: PatientCreate) -> Patient:
        patient = Patient(**patient_data.model_dump())
        self.db.add(patient)
        self.db.commit()
        self.db.refresh(patient)
        return patient
    
    def update_patient(self, patient_id: int, patient_data: PatientUpdate) -> Patient:
        patient = self.get_patient(patient_id)
        
        for field, value in patient_data.model_dump(exclude_unset=True).items():
            # Required columns ignore explicit nulls
            if value is None and field != "notes":
                continue
            setattr(patient, field, value)
        
        self.db.commit()
        self.db.refresh(patient)
        return patient
    
    def delete_patient(self, patient_id: int) -> None:
        patient = self.get_patient(patient_id)
        self.db.delete(patient)
        self.db.commit()
