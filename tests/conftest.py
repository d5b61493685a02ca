from __future__ import annotations

import json

import pytest

from interview_prep.services.question_bank import QuestionBank


SAMPLE_CATALOG = {
	"Backend": {
		"Beginner": [
			{
				"id": 1,
				"question": "What is an HTTP status code?",
				"keywords": ["status", "404"],
				"expectedAnswers": ["A status code tells the client whether the request succeeded"],
				"routeKeywords": {"database": 3, "rest": 2},
				"defaultNextQuestionId": 4,
			},
			{"id": 2, "question": "What is a REST API?", "keywords": ["resource", "http"]},
			{"id": 3, "question": "SQL or NoSQL?", "keywords": ["schema"], "difficulty": 2},
			{"id": 4, "question": "What is recursion?", "keywords": ["recursion", "stack"]},
			{"id": 5, "question": "What is a queue?"},
		],
		"SENIOR": [
			{"id": 101, "question": "Design a rate limiter.", "keywords": ["token bucket"]},
		],
	},
	"frontend": {
		"Beginner": [
			{"id": 201, "question": "What is the DOM?", "keywords": ["tree"]},
		],
	},
}


@pytest.fixture
def catalog_file(tmp_path):
	path = tmp_path / "questions.json"
	path.write_text(json.dumps(SAMPLE_CATALOG), encoding="utf-8")
	return path


@pytest.fixture
def bank(catalog_file):
	return QuestionBank(str(catalog_file))
