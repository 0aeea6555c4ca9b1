from datetime import datetime
from types import SimpleNamespace

from clinic.models.appointment import AppointmentStatus, AppointmentType
from clinic.services.calendar_service import merge_events

from .conftest import test_patient_data

DEFAULT = "#cbd5e1"

def doctor(id, color=None, first="Gregory", last="House"):
    return SimpleNamespace(id=id, color=color, full_name=f"{last} {first}")

def slot(id, doctor_id, booked=False):
    return SimpleNamespace(
        id=id,
        doctor_id=doctor_id,
        start_time=datetime(2024, 3, 1, 8),
        end_time=datetime(2024, 3, 1, 12),
        is_booked=booked,
    )

def appointment(id, doctor_id, patient_id=1, status=AppointmentStatus.SCHEDULED):
    return SimpleNamespace(
        id=id,
        doctor_id=doctor_id,
        patient_id=patient_id,
        start_time=datetime(2024, 3, 1, 9),
        end_time=datetime(2024, 3, 1, 10),
        type=AppointmentType.CONSULTATION,
        status=status,
        motif=None,
        notes="note",
    )

class TestMergeEvents:
    
    def test_availability_before_appointments_in_input_order(self):
        events = merge_events(
            [slot(2, 1), slot(1, 1)],
            [appointment(5, 1), appointment(3, 1)],
            [doctor(1)],
            default_color=DEFAULT,
        )
        assert [e["id"] for e in events] == [
            "availability-2", "availability-1", "appointment-5", "appointment-3"
        ]
        assert [e["kind"] for e in events] == ["availability"] * 2 + ["appointment"] * 2
    
    def test_doctor_color_and_default(self):
        events = merge_events(
            [slot(1, 1), slot(2, 2), slot(3, 99)],
            [],
            [doctor(1, color="#3b82f6"), doctor(2)],
            default_color=DEFAULT,
        )
        assert [e["backgroundColor"] for e in events] == ["#3b82f6", DEFAULT, DEFAULT]
        assert [e["borderColor"] for e in events] == ["#3b82f6", DEFAULT, DEFAULT]
    
    def test_default_color_comes_from_settings(self):
        events = merge_events([slot(1, 99)], [], [])
        assert events[0]["backgroundColor"] == DEFAULT
    
    def test_booked_styling(self):
        free, booked = merge_events([slot(1, 1), slot(2, 1, booked=True)], [], [doctor(1)])
        
        assert free["classNames"] == ["availability", "available"]
        assert free["extendedProps"]["isBooked"] is False
        assert booked["classNames"] == ["availability", "booked"]
        assert booked["extendedProps"]["isBooked"] is True
    
    def test_titles(self):
        patient = SimpleNamespace(id=1, full_name="Curie Marie")
        events = merge_events(
            [slot(1, 1), slot(2, 99)],
            [appointment(1, 1, patient_id=1), appointment(2, 1, patient_id=42)],
            [doctor(1)],
            [patient],
        )
        assert [e["title"] for e in events] == [
            "House Gregory", "Available", "Curie Marie", "Unknown patient"
        ]
    
    def test_appointment_props(self):
        event, = merge_events([], [appointment(7, 1, status=AppointmentStatus.CANCELLED)], [doctor(1)])
        
        assert event["classNames"] == ["appointment", "cancelled"]
        assert event["start"] == datetime(2024, 3, 1, 9)
        assert event["end"] == datetime(2024, 3, 1, 10)
        assert event["extendedProps"] == {
            "appointmentId": 7,
            "doctorId": 1,
            "patientId": 1,
            "type": "consultation",
            "status": "cancelled",
            "motif": None,
            "notes": "note",
        }
    
    def test_colors_may_collide(self):
        events = merge_events(
            [slot(1, 1), slot(2, 2)], [],
            [doctor(1, color="#ef4444"), doctor(2, color="#ef4444", first="James", last="Wilson")],
        )
        assert events[0]["backgroundColor"] == events[1]["backgroundColor"]
    
    def test_empty(self):
        assert merge_events([], [], []) == []

class TestCalendarEndpoint:
    
    def test_events(self, admin_client, doctor_user):
        patient = admin_client.post("/api/patients", json=test_patient_data).json()
        admin_client.post("/api/availability", json={
            "doctorId": doctor_user.id,
            "startTime": "2024-03-01T08:00",
            "endTime": "2024-03-01T12:00"
        })
        admin_client.post("/api/appointments", json={
            "patientId": patient["id"],
            "doctorId": doctor_user.id,
            "startTime": "2024-03-01T09:00",
            "type": "emergency"
        })
        
        response = admin_client.get("/api/calendar/events")
        assert response.status_code == 200
        
        slot_event, appointment_event = response.json()
        assert slot_event["kind"] == "availability"
        assert slot_event["title"] == "House Gregory"
        assert slot_event["backgroundColor"] == "#3b82f6"
        assert slot_event["classNames"] == ["availability", "booked"]
        assert appointment_event["kind"] == "appointment"
        assert appointment_event["title"] == "Curie Marie"
        assert appointment_event["start"] == "2024-03-01T09:00:00Z"
        assert appointment_event["end"] == "2024-03-01T10:00:00Z"
        assert appointment_event["extendedProps"]["type"] == "emergency"
    
    def test_events_filtered_by_doctor(self, admin_client, doctor_user):
        for doctor_id in (doctor_user.id, doctor_user.id + 1):
            admin_client.post("/api/availability", json={
                "doctorId": doctor_id,
                "startTime": "2024-03-01T08:00"
            })
        
        events = admin_client.get("/api/calendar/events", params={"doctorId": doctor_user.id}).json()
        assert [e["extendedProps"]["doctorId"] for e in events] == [doctor_user.id]
