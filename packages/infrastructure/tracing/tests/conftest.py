from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from middy_core.context import InvocationContext


@pytest.fixture()
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture()
def context(logger: MagicMock) -> InvocationContext:
    return InvocationContext(MagicMock(), lambda _: logger)


def enriched(logger: MagicMock) -> dict[str, str]:
    return {
        call.args[0].key: call.args[0].value
        for call in logger.enrich_with.call_args_list
    }


@pytest.fixture()
def enrichment():
    return enriched
