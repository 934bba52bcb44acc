"""Configuration for clog.

One ClogConfig instance is the process-wide set of toggles read on every
print call. It is owned by the ClogManager (see manager.py) and shared by
reference with every profile that manager creates, so flipping a flag on it
takes effect on the next print.

Three-layer resolution in load_config() (highest priority wins):
  1. Keyword overrides — explicit in code
  2. Environment — CLOG_* variables
  3. Config file — JSON, from the path argument or $CLOG_CONFIG
"""

import dataclasses
import json
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .formatter import DEFAULT_TIMESTAMP_FORMAT
from .levels import Level, parse_level

ENV_PREFIX = "CLOG_"
CONFIG_PATH_ENV = "CLOG_CONFIG"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class ClogConfig:
    """Process-wide output toggles.

    Attributes:
        log_to_stdout: Terminal sink enabled
        log_to_syslog: System-log sink enabled
        use_decoration: Wrap terminal lines in the profile's decorations
        use_timestamp: Prefix terminal lines with the current time
        prepend_name: Prefix terminal lines with "[name]"
        min_level: Profiles below this level print nothing to the terminal.
            Accepts anything parse_level() does, at construction or later
        timestamp_format: strftime pattern for the timestamp prefix
        gate_syslog: Apply min_level to the system-log sink as well
        syslog_address: Socket path or "host:port"; None searches for the
            platform's local socket
        syslog_facility: Facility name used for every delivery
        trace: Enable @trace output through the Debug profile
    """
    log_to_stdout: bool = True
    log_to_syslog: bool = False
    use_decoration: bool = True
    use_timestamp: bool = True
    prepend_name: bool = True
    min_level: Level = Level.DEBUG
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    gate_syslog: bool = False
    syslog_address: Optional[str] = None
    syslog_facility: str = "local1"
    trace: bool = False

    def __setattr__(self, name, value):
        # min_level is always a Level, however it was assigned
        if name == "min_level":
            value = parse_level(value)
        super().__setattr__(name, value)

    def copy(self, **changes) -> "ClogConfig":
        """Return a new config with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = dataclasses.asdict(self)
        data["min_level"] = self.min_level.name
        return data


# ---------------------------------------------------------------------------
# Value coercion
# ---------------------------------------------------------------------------
def parse_bool(value) -> bool:
    """Interpret env/JSON values like "yes", "0", True as booleans."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"clog: cannot interpret {value!r} as a boolean")


def _coerce(field_name: str, value):
    if field_name == "min_level":
        return parse_level(value)
    if field_name in _BOOL_FIELDS:
        return parse_bool(value)
    if value is None:
        return None
    return str(value)


_FIELD_NAMES = [f.name for f in fields(ClogConfig)]
_BOOL_FIELDS = {
    "log_to_stdout", "log_to_syslog", "use_decoration", "use_timestamp",
    "prepend_name", "gate_syslog", "trace",
}


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, IsADirectoryError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect CLOG_<FIELD> variables as raw strings keyed by field name."""
    env = os.environ if environ is None else environ
    found = {}
    for name in _FIELD_NAMES:
        key = ENV_PREFIX + name.upper()
        if key in env:
            found[name] = env[key]
    return found


def load_config(path=None, environ: Optional[Mapping[str, str]] = None,
                **overrides) -> ClogConfig:
    """Resolve a ClogConfig using three-layer precedence.

    For each field, checks (in order):
      1. overrides (keyword arguments, None means "not given")
      2. CLOG_<FIELD> environment variables
      3. The JSON config file (keys may use '-' or '_')

    Fields found nowhere keep their ClogConfig default. Unknown keys are
    ignored.

    Raises:
        TypeError: if an override names an unknown field
        UnknownLevel: if min_level cannot be parsed
        ValueError: if a boolean field holds an unrecognised value
    """
    unknown = set(overrides) - set(_FIELD_NAMES)
    if unknown:
        raise TypeError(f"clog: unknown config field(s): {sorted(unknown)}")

    env = os.environ if environ is None else environ
    if path is None:
        path = env.get(CONFIG_PATH_ENV) or None
    file_cfg = load_json(path) if path else {}
    env_cfg = config_from_env(env)

    resolved = {}
    for name in _FIELD_NAMES:
        # Layer 1: explicit overrides
        value = overrides.get(name)
        if value is not None:
            resolved[name] = _coerce(name, value)
            continue

        # Layer 2: environment
        if name in env_cfg:
            resolved[name] = _coerce(name, env_cfg[name])
            continue

        # Layer 3: config file
        json_key = name.replace("_", "-")
        file_val = file_cfg.get(name, file_cfg.get(json_key))
        if file_val is not None:
            resolved[name] = _coerce(name, file_val)

    return ClogConfig(**resolved)


def save_config(config: ClogConfig, path):
    """Write config to a JSON file that load_config() can read back."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
        f.write("\n")
    return path
