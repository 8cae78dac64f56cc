# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared pytest fixtures."""

import logging

import pytest

DIAGNOSTICS_LOGGER = "tests.diagnostics"


@pytest.fixture
def diagnostics(caplog):
    """
    A dedicated logger to inject into the codec, with capture enabled.

    Records sent to it are available via caplog.records and carry
    DIAGNOSTICS_LOGGER as their name.
    """
    caplog.set_level(logging.DEBUG, logger=DIAGNOSTICS_LOGGER)
    return logging.getLogger(DIAGNOSTICS_LOGGER)


@pytest.fixture
def records_from(caplog):
    """Return a helper listing the captured records of one logger."""
    def _records_from(name: str = DIAGNOSTICS_LOGGER):
        return [record for record in caplog.records if record.name == name]
    return _records_from
