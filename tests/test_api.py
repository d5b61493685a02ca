from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from interview_prep import main
from interview_prep.config import settings
from interview_prep.routers import questions as questions_router
from interview_prep.services import interview_flow
from interview_prep.utils.audit import auditor


@pytest.fixture
def client(bank, monkeypatch):
	monkeypatch.setattr(main, "question_bank", bank)
	monkeypatch.setattr(questions_router, "question_bank", bank)
	monkeypatch.setattr(interview_flow, "question_bank", bank)
	monkeypatch.setattr(settings, "api_key", None)
	with TestClient(main.app) as c:
		yield c


def test_health(client):
	resp = client.get("/health")
	assert resp.status_code == 200
	assert resp.json()["catalog"]["domains"] == 2


def test_catalog_listing(client):
	resp = client.get("/api/catalog")
	assert resp.status_code == 200
	assert resp.json() == {
		"domains": [
			{"domain": "backend", "levels": ["beginner", "senior"]},
			{"domain": "frontend", "levels": ["beginner"]},
		]
	}


def test_questions_and_unknown_pair(client):
	resp = client.get("/api/questions/BACKEND/Beginner")
	assert resp.status_code == 200
	assert len(resp.json()["questions"]) == 5

	resp = client.get("/api/questions/devops/beginner")
	assert resp.status_code == 200
	assert resp.json() == {"questions": []}


def test_shuffled_count_bounds(client, monkeypatch):
	resp = client.get("/api/questions/backend/beginner/shuffled", params={"count": 3})
	assert resp.status_code == 200
	assert len(resp.json()["questions"]) == 3

	monkeypatch.setattr(settings, "default_question_count", 2)
	resp = client.get("/api/questions/backend/beginner/shuffled")
	assert len(resp.json()["questions"]) == 2

	assert client.get("/api/questions/backend/beginner/shuffled", params={"count": 0}).status_code == 422
	monkeypatch.setattr(settings, "max_question_count", 4)
	assert client.get("/api/questions/backend/beginner/shuffled", params={"count": 5}).status_code == 422


def test_first_and_next(client):
	resp = client.get("/api/questions/backend/beginner/first")
	assert resp.json()["question"]["id"] == 1

	resp = client.get("/api/questions/backend/beginner/1/next", params={"answer": "REST all the way"})
	assert resp.json()["question"]["id"] == 2

	assert client.get("/api/questions/backend/beginner/5/next").status_code == 404
	assert client.get("/api/questions/backend/beginner/77/next").status_code == 404
	assert client.get("/api/questions/devops/beginner/first").status_code == 404


def test_greeting(client):
	resp = client.get("/api/greeting", params={"name": "Ada", "domain": "Frontend"})
	assert resp.json()["message"].startswith("Hello Ada! Welcome to your technical interview practice session for the Frontend position.")


def test_classify_and_audit(client, tmp_path):
	audit_path = tmp_path / "audit.jsonl"
	auditor.configure(str(audit_path))
	try:
		resp = client.post(
			"/api/answers/classify",
			json={"answer": "I really love pizza and sunshine", "keywords": ["recursion", "stack"]},
		)
	finally:
		auditor.configure(None)

	assert resp.status_code == 200
	assert resp.json() == {
		"profane": False,
		"low_knowledge": False,
		"off_topic": True,
		"verdict": "off_topic",
	}
	record = json.loads(audit_path.read_text(encoding="utf-8").strip())
	assert record["type"] == "classification"
	assert record["verdict"] == "off_topic"


def test_classify_without_keywords(client):
	resp = client.post("/api/answers/classify", json={"answer": "banana"})
	assert resp.json()["verdict"] == "clean"


def test_evaluate(client):
	resp = client.post(
		"/api/answers/evaluate",
		json={"answer": "use a stack", "expected_answers": [], "keywords": ["stack", "queue"]},
	)
	assert resp.status_code == 200
	assert resp.json()["score"] == 20
	assert resp.json()["matched_keywords"] == ["stack"]


def test_review(client):
	resp = client.post(
		"/api/answers/review",
		json={"domain": "backend", "level": "beginner", "question_id": "4", "answer": "i don't know"},
	)
	assert resp.status_code == 200
	body = resp.json()
	assert body["classification"]["verdict"] == "low_knowledge"
	assert body["next_question"]["id"] == 5

	resp = client.post(
		"/api/answers/review",
		json={"domain": "backend", "level": "beginner", "question_id": "404", "answer": "x"},
	)
	assert resp.status_code == 404


def test_api_key_enforced(client, monkeypatch):
	monkeypatch.setattr(settings, "api_key", "secret")
	assert client.get("/api/catalog").status_code == 401
	assert client.get("/api/catalog", headers={"Authorization": "Bearer nope"}).status_code == 401
	assert client.get("/api/catalog", headers={"Authorization": "Bearer secret"}).status_code == 200
	# health stays open
	assert client.get("/health").status_code == 200
