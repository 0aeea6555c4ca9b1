from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...core.permissions import Permission
from ...api.deps import require_permission
from ...services.patient_service import PatientService
from ...schemas.patient import PatientCreate, PatientUpdate, PatientResponse

router = APIRouter(prefix="/patients", tags=["Patients"])

@router.get("", response_model=List[PatientResponse], dependencies=[Depends(require_permission(Permission.PATIENT_READ))])
async def list_patients(db: Session = Depends(get_db)):
    return PatientService(db).list_patients()

@router.post(
    "",
    response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.PATIENT_CREATE))]
)
async def create_patient(patient_data: PatientCreate, db: Session = Depends(get_db)):
    return PatientService(db).create_patient(patient_data)

@router.get("/{patient_id}", response_model=PatientResponse, dependencies=[Depends(require_permission(Permission.PATIENT_READ))])
async def get_patient(patient_id: int, db: Session = Depends(get_db)):
    return PatientService(db).get_patient(patient_id)

@router.patch("/{patient_id}", response_model=PatientResponse, dependencies=[Depends(require_permission(Permission.PATIENT_UPDATE))])
async def update_patient(patient_id: int, patient_data: PatientUpdate, db: Session = Depends(get_db)):
    return PatientService(db).update_patient(patient_id, patient_data)

@router.delete(
    "/{patient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.PATIENT_DELETE))]
)
async def delete_patient(patient_id: int, db: Session = Depends(get_db)):
    PatientService(db).delete_patient(patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
