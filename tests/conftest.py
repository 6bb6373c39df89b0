"""Pytest configuration shared by the SavGolKit test suite."""

import logging
import os

import pytest

from savgolkit.logger import logger_name


@pytest.fixture(autouse=True, scope="session")
def _limit_blas_threads():
    os.environ.setdefault("OMP_NUM_THREADS", "1")
    os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
    os.environ.setdefault("MKL_NUM_THREADS", "1")
    os.environ.setdefault("VECLIB_MAXIMUM_THREADS", "1")
    os.environ.setdefault("NUMEXPR_NUM_THREADS", "1")


@pytest.fixture
def savgolkit_caplog(caplog):
    """Return ``caplog`` capturing everything the savgolkit logger emits."""
    caplog.set_level(logging.DEBUG, logger=logger_name)
    return caplog
