from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional


Question = Dict[str, Any]


class QuestionsOut(BaseModel):
	questions: List[Question]


class QuestionOut(BaseModel):
	question: Question


class CatalogDomain(BaseModel):
	domain: str
	levels: List[str]


class CatalogOut(BaseModel):
	domains: List[CatalogDomain]


class GreetingOut(BaseModel):
	message: str


class ClassifyIn(BaseModel):
	answer: str = Field(..., description="Candidate's spoken or typed answer")
	keywords: Optional[List[str]] = Field(default=None, description="Reference terms for off-topic detection")


class ClassificationOut(BaseModel):
	profane: bool
	low_knowledge: bool
	off_topic: bool
	verdict: Literal["clean", "profane", "low_knowledge", "off_topic"]


class EvaluateIn(BaseModel):
	"""Request to score an answer against reference material.

	- answer: candidate's answer text
	- expected_answers: model answers; their significant words are matched
	- keywords: terms that each earn a share of the keyword points
	"""
	answer: str
	expected_answers: List[str] = Field(default_factory=list)
	keywords: List[str] = Field(default_factory=list)


class EvaluationOut(BaseModel):
	score: int = Field(..., ge=0, le=100)
	feedback: str
	matched_keywords: List[str]


class ReviewIn(BaseModel):
	domain: str = Field(..., min_length=1)
	level: str = Field(..., min_length=1)
	question_id: str = Field(..., min_length=1, description="Catalog question id")
	answer: str


class ReviewOut(BaseModel):
	question: Question
	classification: ClassificationOut
	evaluation: EvaluationOut
	next_question: Optional[Question] = None
