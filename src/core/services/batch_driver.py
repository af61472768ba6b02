"""Batch password generation driver.

Reads a mapping of named password specifications, generates one password per
entry and publishes every result once the whole batch succeeded:

- a tagged `OutputRecord` goes to the output sink;
- entries with `env` set also get `PREFIX_PLAIN` / `PREFIX_ENCODED` in the
  process environment (or the mapping passed as `environ`).

Malformed or empty entries are skipped. A random-source failure aborts the
batch before anything is published and propagates to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from pydantic import ValidationError

from adapters.env_publisher import (
    env_var_names,
    is_valid_env_prefix,
    publish_environment,
    to_env_prefix,
)
from adapters.output_sinks import NullOutputSink
from core.config import AppSettings, load_settings
from core.domain.models import OutputRecord, PasswordResult, PasswordSpec
from core.interfaces.sink import OutputSink
from core.services.password_generator import RandomChoice, generate_password

logger = logging.getLogger(__name__)

HANDLER_NAME = "toolkit.pwgen.generate"


def build_spec(key: str, entry: Any, *, default_length: int) -> PasswordSpec | None:
    """Turn one configuration entry into a `PasswordSpec`, or None to skip it."""

    if not entry:
        logger.debug("skipping empty entry %r", key)
        return None
    if not isinstance(entry, Mapping):
        logger.warning("skipping entry %r: expected a mapping, got %s", key, type(entry).__name__)
        return None
    try:
        spec = PasswordSpec.from_entry(key, dict(entry), default_length=default_length)
    except ValidationError as exc:
        logger.warning("skipping malformed entry %r: %s", key, exc.errors(include_url=False))
        return None
    if spec.env and not is_valid_env_prefix(to_env_prefix(spec.name)):
        logger.warning("skipping entry %r: name %r cannot be exported to the environment", key, spec.name)
        return None
    return spec


def generate_result(spec: PasswordSpec, *, rng: RandomChoice | None = None) -> PasswordResult:
    """Generate the password for `spec` and attach the environment names if requested."""

    env_prefix = to_env_prefix(spec.name) if spec.env else None
    generated = generate_password(spec.length, spec.symbols, spec.encoding, rng=rng)
    return PasswordResult(
        name=spec.name,
        length=spec.length,
        encoding=generated.encoding.value,
        plain=generated.plain,
        encoded=generated.encoded,
        symbols=spec.symbols,
        environment=env_var_names(env_prefix) if env_prefix else [],
        env_prefix=env_prefix,
    )


def publish(
    results: list[PasswordResult],
    *,
    sink: OutputSink,
    environ: MutableMapping[str, str] | None = None,
    tags: list[str] | None = None,
) -> None:
    """Deliver each result to the sink (and environment) in production order.

    `tags=None` keeps the record default (`toolkit`, `pwgen`); an empty list
    publishes untagged records.
    """

    for result in results:
        if tags is None:
            record = OutputRecord(name=result.name, value=result)
        else:
            record = OutputRecord(name=result.name, value=result, tags=list(tags))
        sink.append(record)
        publish_environment(result, environ)


def run_batch(
    config: Mapping[str, Any] | None,
    *,
    sink: OutputSink | None = None,
    environ: MutableMapping[str, str] | None = None,
    settings: AppSettings | None = None,
    rng: RandomChoice | None = None,
) -> list[PasswordResult]:
    """Generate and publish every password described by `config`.

    Returns the published results. `PasswordGenerationError` propagates and
    leaves both the sink and the environment untouched.
    """

    if not config:
        return []

    settings = settings or load_settings()
    if sink is None:
        sink = NullOutputSink()

    results: list[PasswordResult] = []
    for key, entry in config.items():
        spec = build_spec(str(key), entry, default_length=settings.default_length)
        if spec is None:
            continue
        results.append(generate_result(spec, rng=rng))

    publish(results, sink=sink, environ=environ, tags=settings.output_tags)
    logger.info("published %d password(s) via %s", len(results), HANDLER_NAME)
    return results
