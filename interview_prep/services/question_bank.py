from __future__ import annotations

import json
import logging
import random
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from interview_prep.config import BUNDLED_CATALOG_PATH, settings


logger = logging.getLogger(__name__)

Question = Dict[str, Any]
QuestionCatalog = Dict[str, Dict[str, List[Question]]]


def parse_catalog(raw: Any) -> QuestionCatalog:
	"""Build a catalog from the decoded JSON document.

	Layout is ``{domain: {level: [question, ...]}}``. Domain and level keys are
	lowercased here so lookups only normalize the caller's input. Entries with
	the wrong shape are skipped; question objects are passed through untouched.
	"""
	catalog: QuestionCatalog = {}
	if not isinstance(raw, dict):
		logger.warning("Question catalog root is %s, expected an object", type(raw).__name__)
		return catalog

	for domain_name, levels_raw in raw.items():
		if not isinstance(levels_raw, dict):
			logger.warning("Skipping domain %r: levels must be an object", domain_name)
			continue
		levels: Dict[str, List[Question]] = catalog.setdefault(str(domain_name).lower(), {})
		for level_name, questions_raw in levels_raw.items():
			if not isinstance(questions_raw, list):
				logger.warning("Skipping %s/%s: questions must be a list", domain_name, level_name)
				continue
			questions = [q for q in questions_raw if isinstance(q, dict)]
			if len(questions) != len(questions_raw):
				logger.warning(
					"Dropped %d non-object question(s) in %s/%s",
					len(questions_raw) - len(questions), domain_name, level_name,
				)
			levels.setdefault(str(level_name).lower(), []).extend(questions)
	return catalog


class QuestionBank:
	"""Lazily loaded, read-only catalog of interview questions.

	The catalog file is read once, on first access. Loading is guarded by a
	lock so concurrent first callers build it exactly once; afterwards reads
	go straight to the cached dict.
	"""

	def __init__(self, catalog_path: Optional[str] = None) -> None:
		self._path = Path(catalog_path or settings.question_catalog_path or BUNDLED_CATALOG_PATH)
		self._catalog: QuestionCatalog = {}
		self._loaded = False
		self._lock = threading.Lock()

	@property
	def catalog_path(self) -> Path:
		return self._path

	def _read_catalog(self) -> QuestionCatalog:
		if not self._path.exists():
			logger.warning("Question catalog not found at %s; serving empty question sets", self._path)
			return {}
		try:
			raw = json.loads(self._path.read_text(encoding="utf-8"))
		except (OSError, ValueError) as exc:
			logger.error("Failed to read question catalog %s: %s", self._path, exc)
			return {}
		catalog = parse_catalog(raw)
		logger.info("Loaded question catalog from %s. Domains: %s", self._path, sorted(catalog))
		return catalog

	def _ensure_loaded(self) -> QuestionCatalog:
		if self._loaded:
			return self._catalog
		with self._lock:
			if not self._loaded:
				self._catalog = self._read_catalog()
				self._loaded = True
		return self._catalog

	def reload(self) -> None:
		"""Drop the cached catalog; the next access reads the file again."""
		with self._lock:
			self._catalog = {}
			self._loaded = False

	def domains(self) -> List[str]:
		return sorted(self._ensure_loaded())

	def levels(self, domain: str) -> List[str]:
		return sorted(self._ensure_loaded().get(domain.lower(), {}))

	def get_questions(self, domain: str, level: str) -> List[Question]:
		catalog = self._ensure_loaded()
		questions = catalog.get(domain.lower(), {}).get(level.lower())
		if questions is None:
			logger.debug("No questions found for domain=%s level=%s", domain, level)
			return []
		return list(questions)

	def get_shuffled_questions(self, domain: str, level: str, count: int) -> List[Question]:
		questions = self.get_questions(domain, level)
		if not questions or count <= 0:
			return []
		# random.sample draws a uniform permutation prefix without touching the cache
		return random.sample(questions, min(count, len(questions)))

	def get_question(self, domain: str, level: str, question_id: Any) -> Optional[Question]:
		for question in self.get_questions(domain, level):
			if _same_id(question.get("id"), question_id):
				return question
		return None

	def get_first_question(self, domain: str, level: str) -> Optional[Question]:
		questions = self.get_questions(domain, level)
		return questions[0] if questions else None

	def get_next_question(self, domain: str, level: str, current_id: Any) -> Optional[Question]:
		"""Sequential successor of ``current_id``; None when unknown or last."""
		questions = self.get_questions(domain, level)
		for index, question in enumerate(questions):
			if _same_id(question.get("id"), current_id):
				if index + 1 < len(questions):
					return questions[index + 1]
				return None
		return None

	def get_next_question_by_keywords(
		self,
		domain: str,
		level: str,
		current_id: Any,
		answer: str,
	) -> Optional[Question]:
		"""Pick the follow-up question from keywords found in the answer.

		The current question may carry ``routeKeywords`` (keyword -> question id).
		The first keyword, in catalog order, that appears in the answer wins.
		Otherwise ``defaultNextQuestionId`` is used, then plain sequential order.
		"""
		current = self.get_question(domain, level, current_id)
		if current is None:
			return None

		route_keywords = current.get("routeKeywords")
		if isinstance(route_keywords, dict) and answer:
			answer_lower = answer.lower()
			for keyword, target_id in route_keywords.items():
				if str(keyword).lower() in answer_lower:
					target = self.get_question(domain, level, target_id)
					if target is not None:
						logger.info("Keyword routing: %r -> question %s", keyword, target_id)
						return target
					break

		default_id = current.get("defaultNextQuestionId")
		if default_id is not None:
			target = self.get_question(domain, level, default_id)
			if target is not None:
				logger.info("Using defaultNextQuestionId: %s", default_id)
				return target

		return self.get_next_question(domain, level, current_id)


def _same_id(left: Any, right: Any) -> bool:
	# Path parameters arrive as strings while catalog ids are usually ints
	if left is None or right is None:
		return False
	return str(left) == str(right)


question_bank = QuestionBank()
