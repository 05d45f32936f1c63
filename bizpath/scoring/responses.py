"""Quiz response loading and validation utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from bizpath.scoring.config import ScoringConfig, get_scoring_config
from bizpath.scoring.fields import RESOLVED_FIELDS, missing_fields
from bizpath.scoring.models import QuizResponse

logger = logging.getLogger(__name__)

_PARSERS_BY_SUFFIX = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}


class ResponseService:
    """Service for loading and validating saved quiz responses."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or get_scoring_config()

    def load_response(self, path: Path | str | None = None) -> QuizResponse:
        """Load and validate a response from YAML or JSON.

        Files without a `.yaml`/`.yml`/`.json` suffix are read as JSON when
        they start with `{` and parse as JSON, otherwise as YAML. An empty
        document is an unanswered questionnaire.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file cannot be parsed or does not hold a
                single mapping of question names to answers.
            pydantic.ValidationError: If an answer has the wrong type.
        """
        response_path = Path(path) if path is not None else self.config.response_path
        if not response_path.exists():
            raise FileNotFoundError(f"Quiz response not found: {response_path}")

        raw = response_path.read_text(encoding="utf-8")
        parser = _PARSERS_BY_SUFFIX.get(response_path.suffix.lower())
        if parser == "json":
            data = self._parse_json(raw, response_path)
        elif parser == "yaml":
            data = self._parse_yaml(raw, response_path)
        else:
            data = self._parse_sniffed(raw, response_path)

        answers = self._as_answers(data, response_path)
        logger.debug("Loaded %d answers from %s", len(answers), response_path)
        return QuizResponse.model_validate(answers)

    def validate_response(self, response: QuizResponse) -> list[str]:
        """Return warnings for scored values that will fall back to defaults."""
        warnings: list[str] = []
        for name in missing_fields(response):
            spec = RESOLVED_FIELDS[name]
            warnings.append(
                f"Missing {name.replace('_', ' ')}; using default {spec.default!r}"
            )
        return warnings

    def _parse_json(self, raw: str, path: Path) -> Any:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Invalid JSON response: {path} (line {e.lineno}: {e.msg})"
            ) from e

    def _parse_yaml(self, raw: str, path: Path) -> Any:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML response: {path}") from e

    def _parse_sniffed(self, raw: str, path: Path) -> Any:
        # YAML flow mappings also start with "{", so JSON failures retry as YAML
        if raw.lstrip().startswith(("{", "[")):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                logger.debug("%s is not JSON; reading it as YAML", path)
        return self._parse_yaml(raw, path)

    def _as_answers(self, data: Any, path: Path) -> dict:
        if data is None:
            return {}
        if isinstance(data, list):
            raise ValueError(
                f"Quiz response holds a list of {len(data)} items, expected one "
                f"mapping of question names to answers: {path}"
            )
        if not isinstance(data, dict):
            raise ValueError(
                f"Quiz response holds a {type(data).__name__}, expected a "
                f"mapping of question names to answers: {path}"
            )
        non_string = [key for key in data if not isinstance(key, str)]
        if non_string:
            raise ValueError(
                f"Quiz response keys must be question names, got {non_string!r}: {path}"
            )
        return data
