"""Shared fixtures for Copilot metrics tests."""

import json
from typing import Any

import pytest

from payloads import daily_record, language


@pytest.fixture
def java_payload() -> str:
    return json.dumps(
        [
            daily_record(
                [[language("java", 1000, 300), language("java", 500, 127)]]
            )
        ]
    )


@pytest.fixture
def mixed_document() -> list[dict[str, Any]]:
    # python 200/80, typescript 250/130, rust 40/20, go 0/0
    return [
        daily_record(
            [
                [language("python", 100, 50), language("go", 0, 0)],
                [language("typescript", 200, 120)],
            ],
            [[language("python", 100, 30)]],
        ),
        {"date": "2024-06-25"},
        daily_record([[language("typescript", 50, 10), language("rust", 40, 20)]]),
    ]
