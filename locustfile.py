from locust import HttpUser, task, between, events
import random
import uuid
import os
import requests


SEED_POLLS = 5


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    from dotenv import load_dotenv
    load_dotenv()

    base_url = os.getenv("LOCUST_HOST", environment.host)

    print("Seeding test data...")
    email = f"seed-{uuid.uuid4().hex[:8]}@example.com"
    response = requests.post(
        f"{base_url}/api/register",
        json={
            "name": "Seed Founder",
            "email": email,
            "password": "seed-password",
            "startupName": "Seed Co",
        }
    )
    if response.status_code != 201:
        raise RuntimeError(f"Failed to register seed user: {response.status_code} {response.text}")

    response = requests.post(
        f"{base_url}/api/login",
        json={"email": email, "password": "seed-password"}
    )
    if response.status_code != 200:
        raise RuntimeError(f"Failed to login seed user: {response.status_code} {response.text}")
    headers = {"Authorization": f"Bearer {response.json()['token']}"}

    for i in range(SEED_POLLS):
        poll_response = requests.post(
            f"{base_url}/api/polls",
            json={
                "question": f"Seed poll {i}?",
                "options": ["Yes", "No", "Maybe"]
            },
            headers=headers
        )
        if poll_response.status_code != 200:
            raise RuntimeError(f"Failed to create poll {i+1} in test setup: {poll_response.status_code} {poll_response.text}")


class FounderUser(HttpUser):
    wait_time = between(1, 2)

    def on_start(self):
        """Register a fresh account and log in"""
        email = f"load-{uuid.uuid4().hex}@example.com"
        self.client.post(
            "/api/register",
            json={
                "name": "Load Founder",
                "email": email,
                "password": "load-password",
                "startupName": "Load Co",
            },
            name="POST /api/register"
        )
        response = self.client.post(
            "/api/login",
            json={"email": email, "password": "load-password"},
            name="POST /api/login"
        )
        self.headers = {}
        if response.status_code == 200:
            self.headers = {"Authorization": f"Bearer {response.json()['token']}"}

    @task(5)
    def read_feed(self):
        self.client.get("/api/feed?page=1", headers=self.headers, name="GET /api/feed")

    @task(2)
    def read_status_board(self):
        self.client.get("/api/status", headers=self.headers, name="GET /api/status")

    @task(1)
    def toggle_status(self):
        self.client.put(
            "/api/status/update",
            json={"status": random.choice(["In Office", "Out of Office"])},
            headers=self.headers,
            name="PUT /api/status/update"
        )

    @task(1)
    def post_update(self):
        self.client.post(
            "/api/updates",
            json={"content": f"Shipped build {random.randint(1, 10000)}"},
            headers=self.headers,
            name="POST /api/updates"
        )

    @task(2)
    def vote_on_open_poll(self):
        response = self.client.get("/api/polls?page=1", headers=self.headers, name="GET /api/polls")
        if response.status_code != 200:
            return

        polls = response.json().get("polls", [])
        if not polls:
            return

        poll = random.choice(polls)
        option = random.choice(poll["options"])
        with self.client.post(
            f"/api/polls/{poll['id']}/vote",
            json={"optionId": option["id"]},
            headers=self.headers,
            name="POST /api/polls/<poll_id>/vote",
            catch_response=True
        ) as vote_response:
            # A repeat vote is an expected outcome under load, not a failure
            if vote_response.status_code in (200, 400):
                vote_response.success()
            else:
                vote_response.failure(f"Vote failed for poll {poll['id']}  {vote_response.text}")
