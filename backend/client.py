# backend/client.py
import requests

API = "http://localhost:8000/api/v1"  # adjust if running on docker-compose

SAMPLE = """Project kickoff notes
- Review the quarterly budget, urgent
- Send the slides to Maria
2. Book a venue for the offsite (maybe later)
contact: team@example.com"""

def test_preview():
    r = requests.post(f"{API}/tasks/parse/preview", json={"text": SAMPLE, "use_ai": False})
    print("Preview:", r.status_code, r.json())

def test_parse_and_save():
    r = requests.post(f"{API}/tasks/parse", json={"text": SAMPLE})
    print("Parse & Save:", r.status_code, r.json())

def test_create_task():
    payload = {
        "title": "Finish FastAPI client",
        "description": "Write a simple requests-based client script",
        "priority": "low",
    }
    r = requests.post(f"{API}/tasks", json=payload)
    print("Create task:", r.status_code, r.json())
    return r.json()["id"]

def test_complete_task(task_id):
    r = requests.patch(f"{API}/tasks/{task_id}", json={"status": "completed"})
    print("Complete task:", r.status_code, r.json())

def test_list_tasks():
    r = requests.get(f"{API}/tasks")
    print("List tasks:", r.status_code, r.json())

if __name__ == "__main__":
    print("--- Testing FastAPI backend ---")
    test_preview()
    test_parse_and_save()
    task_id = test_create_task()
    test_complete_task(task_id)
    test_list_tasks()
