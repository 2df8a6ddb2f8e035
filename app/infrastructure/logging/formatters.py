"""Structlog processors used by the logging pipeline.

Each factory returns a processor with the usual
``(logger, method_name, event_dict) -> event_dict`` signature.
"""

from typing import Any, Iterable

EventDict = dict[str, Any]

# Values that come straight from the browser
USER_INPUT_KEYS = frozenset({"cookie_value", "locale_str", "name"})


def add_app_info(app_name: str, app_version: str = "unknown", environment: str = ""):
    """Stamp every entry with the application name, version and environment.

    Args:
        app_name: Name reported as ``app_name``.
        app_version: Git SHA or release reported as ``app_version``.
        environment: Deployment prefix; empty means production.
    """
    env = environment.rstrip("-") or "production"

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        event_dict.setdefault("environment", env)
        return event_dict

    return processor


def clip_user_input(max_length: int = 64, keys: Iterable[str] = USER_INPUT_KEYS):
    """Shorten browser supplied values before they reach the log.

    Cookie values and posted names are free text; only a prefix is kept.
    """
    clipped = frozenset(keys)

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key in clipped & event_dict.keys():
            value = event_dict[key]
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}...(+{len(value) - max_length})"
        return event_dict

    return processor


def truncate_large_values(max_length: int = 500):
    """Cap any string value at ``max_length`` characters."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
