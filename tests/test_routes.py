import asyncio
import json

from fastapi.testclient import TestClient

from agenda.core.storage import MemoryStorage
from agenda.server import create_app
from agenda.services.contacts import ContactStore


def stored_contacts(storage):
    store = ContactStore(storage, "contacts")
    asyncio.run(store.load())
    return store.list()


def test_root_and_health(client):
    assert client.get("/api/").json()["status"] == "running"
    health = client.get("/api/health").json()
    assert health["status"] == "healthy"
    assert health["storage"] == "memory"
    assert health["contacts"] == 0


def test_startup_loads_saved_contacts():
    blob = json.dumps([{"id": "abc", "name": "Juan Perez", "phone": "04141234567"}])
    app = create_app(storage=MemoryStorage({"contacts": blob}))
    with TestClient(app) as client:
        contacts = client.get("/api/contacts").json()
    assert contacts == [{"id": "abc", "name": "Juan Perez", "phone": "04141234567"}]


def test_startup_with_malformed_data_starts_empty():
    app = create_app(storage=MemoryStorage({"contacts": "not json"}))
    with TestClient(app) as client:
        assert client.get("/api/contacts").json() == []


def test_contacts_crud(client, storage):
    created = client.post("/api/contacts", json={"name": "Juan Perez", "phone": "04141234567"}).json()
    assert created["name"] == "Juan Perez"
    assert [c.id for c in stored_contacts(storage)] == [created["id"]]

    assert client.get(f"/api/contacts/{created['id']}").json() == created

    response = client.put(f"/api/contacts/{created['id']}", json={"name": "Ana Gomez", "phone": "02121234567"})
    assert response.json() == {"success": True}
    assert stored_contacts(storage)[0].name == "Ana Gomez"

    assert client.delete(f"/api/contacts/{created['id']}").json() == {"success": True}
    assert stored_contacts(storage) == []


def test_create_rejects_invalid_input(client):
    response = client.post("/api/contacts", json={"name": "juan perez", "phone": "04141234567"})
    assert response.status_code == 422
    response = client.post("/api/contacts", json={"name": "Juan Perez", "phone": "05141234567"})
    assert response.status_code == 422
    assert client.get("/api/contacts").json() == []


def test_unknown_ids(client):
    assert client.get("/api/contacts/missing").status_code == 404
    response = client.put("/api/contacts/missing", json={"name": "Ana Gomez", "phone": "02121234567"})
    assert response.status_code == 200
    assert client.delete("/api/contacts/missing").status_code == 200
    assert client.get("/api/contacts").json() == []


def test_form_commands_flow(client):
    page = client.get("/api/form").json()
    assert page["form"]["submit_enabled"] is False

    def send(command):
        response = client.post("/api/form/commands", json={"command": command})
        assert response.status_code == 200
        return response.json()

    page = send({"kind": "submit"})
    assert page["contacts"] == []

    send({"kind": "input_name", "value": "Juan Perez"})
    page = send({"kind": "input_phone", "value": "04141234567"})
    assert page["form"]["submit_enabled"] is True

    page = send({"kind": "submit"})
    contact_id = page["contacts"][0]["id"]

    page = send({"kind": "toggle_edit", "id": contact_id})
    assert page["contacts"][0]["editing"] is True
    send({"kind": "edit_input", "id": contact_id, "field": "phone", "value": "04241234567"})
    page = send({"kind": "toggle_edit", "id": contact_id})
    assert page["contacts"][0]["phone"] == "04241234567"
    assert client.get(f"/api/contacts/{contact_id}").json()["phone"] == "04241234567"

    page = send({"kind": "delete", "id": contact_id})
    assert page["contacts"] == []


def test_form_rejects_unknown_command(client):
    response = client.post("/api/form/commands", json={"command": {"kind": "explode"}})
    assert response.status_code == 422
