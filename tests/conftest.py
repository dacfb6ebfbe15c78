# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration for serial integration tests."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--device",
        action="store",
        default="loop://",
        help="Loopback serial port or pyserial URL (default: loop://)",
    )


@pytest.fixture(scope="session")
def device_port(request):
    """Get the device port from command line."""
    return request.config.getoption("--device")


@pytest.fixture
def source(device_port):
    """
    Open a serial source on the loopback port.

    Function-scoped so each test starts with an empty line.
    """
    from leb128_codec.transport import SerialSource

    source = SerialSource(device_port, timeout=0.2)
    yield source
    source.close()
