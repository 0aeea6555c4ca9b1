from .conftest import test_patient_data

def create_patient(client, **overrides):
    response = client.post("/api/patients", json=dict(test_patient_data, **overrides))
    assert response.status_code == 201, response.text
    return response.json()

class TestPatients:
    
    def test_create_patient(self, staff_client):
        response = staff_client.post("/api/patients", json=test_patient_data)
        assert response.status_code == 201
        
        data = response.json()
        assert isinstance(data["id"], int)
        assert {k: v for k, v in data.items() if k != "id"} == test_patient_data
    
    def test_create_patient_without_notes(self, staff_client):
        payload = {k: v for k, v in test_patient_data.items() if k != "notes"}
        
        data = create_patient(staff_client, notes=None)
        assert data["notes"] is None
        
        response = staff_client.post("/api/patients", json=payload)
        assert response.status_code == 201
    
    def test_create_patient_accepts_snake_case(self, staff_client):
        response = staff_client.post("/api/patients", json={
            "first_name": "Louis",
            "last_name": "Pasteur",
            "date_of_birth": "1952-12-27",
            "phone": "0102030405",
            "email": "louis@example.com"
        })
        assert response.status_code == 201
        assert response.json()["firstName"] == "Louis"
    
    def test_create_patient_missing_fields(self, staff_client):
        response = staff_client.post("/api/patients", json={"firstName": "Marie"})
        assert response.status_code == 400
        
        body = response.json()
        assert body["error"] == "Validation failed"
        missing = {tuple(d["loc"])[-1] for d in body["details"]}
        assert {"lastName", "dateOfBirth", "phone", "email"} <= missing
    
    def test_create_patient_invalid_email(self, staff_client):
        response = staff_client.post("/api/patients", json=dict(test_patient_data, email="not-an-email"))
        assert response.status_code == 400
    
    def test_list_patients(self, staff_client):
        create_patient(staff_client)
        create_patient(staff_client, firstName="Louis", lastName="Pasteur", email="louis@example.com")
        
        response = staff_client.get("/api/patients")
        assert response.status_code == 200
        assert [p["lastName"] for p in response.json()] == ["Curie", "Pasteur"]
    
    def test_get_patient(self, staff_client):
        patient = create_patient(staff_client)
        
        response = staff_client.get(f"/api/patients/{patient['id']}")
        assert response.status_code == 200
        assert response.json() == patient
    
    def test_get_missing_patient(self, staff_client):
        response = staff_client.get("/api/patients/404")
        assert response.status_code == 404
        assert response.json() == {"error": "Patient 404 not found"}
    
    def test_update_patient_partial(self, staff_client):
        patient = create_patient(staff_client)
        
        response = staff_client.patch(f"/api/patients/{patient['id']}", json={"phone": "0600000000"})
        assert response.status_code == 200
        assert response.json() == dict(patient, phone="0600000000")
    
    def test_update_patient_clears_notes(self, staff_client):
        patient = create_patient(staff_client)
        
        response = staff_client.patch(f"/api/patients/{patient['id']}", json={"notes": None})
        assert response.json()["notes"] is None
    
    def test_update_missing_patient(self, staff_client):
        response = staff_client.patch("/api/patients/404", json={"phone": "0600000000"})
        assert response.status_code == 404
    
    def test_delete_patient(self, staff_client):
        patient = create_patient(staff_client)
        
        response = staff_client.delete(f"/api/patients/{patient['id']}")
        assert response.status_code == 204
        assert response.content == b""
        assert staff_client.get(f"/api/patients/{patient['id']}").status_code == 404
    
    def test_delete_missing_patient(self, staff_client):
        assert staff_client.delete("/api/patients/404").status_code == 404
