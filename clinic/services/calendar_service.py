"""
Calendar presentation.

Merges availability slots and appointments into one list of events shaped
for the calendar widget. Nothing here touches the database; the route
loads the rows and hands them over.
"""
from typing import Any, Dict, Iterable, List, Optional

from ..core.config import settings


def _index(rows: Optional[Iterable]) -> Dict[int, Any]:
    return {row.id: row for row in rows or []}


def _color(doctor, default_color: str) -> str:
    return (doctor.color if doctor is not None else None) or default_color


def _enum_value(value):
    return getattr(value, "value", value)


def availability_event(slot, doctor, default_color: str) -> Dict[str, Any]:
    color = _color(doctor, default_color)
    return {
        "id": f"availability-{slot.id}",
        "kind": "availability",
        "title": doctor.full_name if doctor is not None else "Available",
        "start": slot.start_time,
        "end": slot.end_time,
        "backgroundColor": color,
        "borderColor": color,
        "classNames": ["availability", "booked" if slot.is_booked else "available"],
        "extendedProps": {
            "availabilityId": slot.id,
            "doctorId": slot.doctor_id,
            "isBooked": slot.is_booked,
        },
    }


def appointment_event(appointment, doctor, patient, default_color: str) -> Dict[str, Any]:
    color = _color(doctor, default_color)
    status = _enum_value(appointment.status)
    return {
        "id": f"appointment-{appointment.id}",
        "kind": "appointment",
        "title": patient.full_name if patient is not None else "Unknown patient",
        "start": appointment.start_time,
        "end": appointment.end_time,
        "backgroundColor": color,
        "borderColor": color,
        "classNames": ["appointment", status],
        "extendedProps": {
            "appointmentId": appointment.id,
            "doctorId": appointment.doctor_id,
            "patientId": appointment.patient_id,
            "type": _enum_value(appointment.type),
            "status": status,
            "motif": appointment.motif,
            "notes": appointment.notes,
        },
    }


def merge_events(
    availabilities: Iterable,
    appointments: Iterable,
    doctors: Iterable,
    patients: Optional[Iterable] = None,
    default_color: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Availability events first, then appointment events, each in input order."""
    if default_color is None:
        default_color = settings.DEFAULT_EVENT_COLOR
    doctors_by_id = _index(doctors)
    patients_by_id = _index(patients)
    
    events = [
        availability_event(slot, doctors_by_id.get(slot.doctor_id), default_color)
        for slot in availabilities
    ]
    events.extend(
        appointment_event(
            appointment,
            doctors_by_id.get(appointment.doctor_id),
            patients_by_id.get(appointment.patient_id),
            default_color,
        )
        for appointment in appointments
    )
    return events
