"""Package-wide constants."""

from __future__ import annotations

PACKAGE_VERSION = "0.3.0"
SCHEMA_VERSION = "1.0.0"

DEVFLOW_DIR = ".devflow"
STEPS_DIR = f"{DEVFLOW_DIR}/steps"
HISTORY_DIR = f"{DEVFLOW_DIR}/history"
QUEUE_DIR = f"{DEVFLOW_DIR}/queue"
REPORTS_DIR = f"{DEVFLOW_DIR}/reports"
STATE_FILE = f"{DEVFLOW_DIR}/state.json"
PRESET_FILE = f"{DEVFLOW_DIR}/preset.json"
CONFIG_FILE = f"{DEVFLOW_DIR}/config.yaml"

STEPS_KEEP_MARKER = ".keep"
QUEUE_KEEP_MARKER = ".gitkeep"

BUILD_OK_STATUS = "ok"
