"""Pytest configuration and fixtures."""

import os
from typing import Any

import pytest

from dynaform.blueprint import parse_blueprint
from dynaform.core.errors import SubmissionError


CONFIG_URL = "http://forms.test/reg"


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["DYNAFORM_LOG_LEVEL"] = "DEBUG"
    os.environ["DYNAFORM_CONFIG_URL"] = CONFIG_URL


# ============================================================================
# Fakes
# ============================================================================

class RecordingSubmitter:
    """Submitter double that records payloads instead of POSTing."""

    def __init__(self, fail_with: SubmissionError | None = None) -> None:
        self.payloads: list[dict[str, Any]] = []
        self.fail_with = fail_with

    def submit(self, payload: dict[str, Any]) -> Any:
        self.payloads.append(payload)
        if self.fail_with is not None:
            raise self.fail_with
        return None


@pytest.fixture
def submitter():
    """Submitter that always succeeds."""
    return RecordingSubmitter()


@pytest.fixture
def failing_submitter():
    """Submitter whose POST is rejected by the server."""
    return RecordingSubmitter(fail_with=SubmissionError("Submission rejected with HTTP 503", 503))


# ============================================================================
# Blueprint Fixtures
# ============================================================================

@pytest.fixture
def registration_document():
    """Registration form close to the production blueprint."""
    return {
        "blueprint": [
            {
                "type": "block",
                "elements": [
                    {"type": "heading", "value": "Create account"},
                    {"type": "paragraph", "value": "All fields marked * are required."},
                ],
            },
            {
                "type": "row",
                "columns": [
                    {
                        "size": 2,
                        "elements": [
                            {
                                "type": "input",
                                "name": "email",
                                "label": "Email",
                                "required": True,
                                "validator": [
                                    {"type": "pattern", "regexp": "^[^@\\s]+@[^@\\s]+\\.[^@\\s]+$"}
                                ],
                            },
                            {
                                "type": "password",
                                "name": "password",
                                "label": "Password",
                                "help": "At least 8 characters",
                                "required": True,
                                "validator": [
                                    {"type": "length", "operator": "gte", "value": 8},
                                ],
                            },
                        ],
                    },
                    {
                        "size": 1,
                        "elements": [
                            {"type": "checkbox", "name": "terms", "label": "I accept the terms", "required": True},
                            {"type": "checkbox", "name": "newsletter", "label": "Newsletter"},
                        ],
                    },
                ],
            },
            {
                "type": "row",
                "columns": [{"size": 1, "elements": [{"type": "submit", "label": "Register"}]}],
            },
        ]
    }


@pytest.fixture
def registration_blueprint(registration_document):
    """Parsed registration blueprint."""
    return parse_blueprint(registration_document)


@pytest.fixture
def email_blueprint():
    """One row, one column, one required email input."""
    return parse_blueprint(
        {
            "blueprint": [
                {
                    "type": "row",
                    "columns": [
                        {
                            "size": 1,
                            "elements": [
                                {"type": "input", "name": "email", "label": "Email", "required": True},
                                {"type": "submit", "label": "Send"},
                            ],
                        }
                    ],
                }
            ]
        }
    )


@pytest.fixture
def bio_blueprint():
    """Bio input with a minimum length rule."""
    return parse_blueprint(
        {
            "blueprint": [
                {
                    "type": "row",
                    "columns": [
                        {
                            "size": 1,
                            "elements": [
                                {
                                    "type": "input",
                                    "name": "bio",
                                    "label": "Bio",
                                    "validator": [{"type": "length", "operator": "gte", "value": 10}],
                                }
                            ],
                        }
                    ],
                }
            ]
        }
    )


@pytest.fixture
def block_only_required_blueprint():
    """Required input inside a block container next to an empty row."""
    return parse_blueprint(
        {
            "blueprint": [
                {
                    "type": "block",
                    "elements": [
                        {"type": "input", "name": "nickname", "label": "Nickname", "required": True},
                    ],
                },
                {"type": "row", "columns": [{"size": 1, "elements": []}]},
            ]
        }
    )
