from __future__ import annotations

import re
from dataclasses import dataclass, asdict
from typing import Iterable, List, Literal, Optional


Verdict = Literal["clean", "profane", "low_knowledge", "off_topic"]

PROFANITY_WORDS: tuple[str, ...] = (
	"fuck", "shit", "damn", "hell", "bitch", "ass", "bastard", "crap",
	"stupid", "idiot", "dumb", "moron", "retard", "piss",
)

ABUSIVE_PHRASES: tuple[str, ...] = (
	"i am angry", "you are bad", "you are stupid", "you are dumb",
	"you are wrong", "this is bad", "this is stupid", "this is dumb",
	"i hate", "i am frustrated", "this is terrible",
)

LOW_KNOWLEDGE_PHRASES: tuple[str, ...] = (
	"i don't know", "i don't know that", "i have no idea",
	"i'm not sure", "i'm not familiar", "i haven't learned",
	"i don't understand", "i can't answer",
)

# Off-topic detection matches these against the whole answer, unlike is_profane
_ABUSIVE_PATTERNS = tuple(re.compile(phrase) for phrase in ABUSIVE_PHRASES)


@dataclass(frozen=True)
class ClassificationResult:
	profane: bool
	low_knowledge: bool
	off_topic: bool

	@property
	def verdict(self) -> Verdict:
		if self.profane:
			return "profane"
		if self.low_knowledge:
			return "low_knowledge"
		if self.off_topic:
			return "off_topic"
		return "clean"

	def to_dict(self) -> dict:
		return {**asdict(self), "verdict": self.verdict}


def is_profane(answer: str) -> bool:
	"""Plain substring search, so "classic" trips on "ass"."""
	lower = answer.lower()
	return any(word in lower for word in PROFANITY_WORDS) or any(
		phrase in lower for phrase in ABUSIVE_PHRASES
	)


def is_low_knowledge(answer: str) -> bool:
	lower = answer.lower()
	return any(phrase in lower for phrase in LOW_KNOWLEDGE_PHRASES)


def is_off_topic(answer: str, keywords: Optional[Iterable[str]]) -> bool:
	keyword_list: List[str] = [k for k in (keywords or []) if isinstance(k, str)]
	if not keyword_list:
		return False

	lower = answer.lower()
	if any(pattern.fullmatch(lower) for pattern in _ABUSIVE_PATTERNS):
		return True

	if any(keyword.lower() in lower for keyword in keyword_list):
		return False

	return len(answer.split()) >= 2


def classify_answer(answer: str, keywords: Optional[Iterable[str]] = None) -> ClassificationResult:
	keyword_list = list(keywords or [])
	return ClassificationResult(
		profane=is_profane(answer),
		low_knowledge=is_low_knowledge(answer),
		off_topic=is_off_topic(answer, keyword_list),
	)
