from __future__ import annotations

import functools
import json
from importlib import resources
from typing import Any, Mapping

from jsonschema import Draft202012Validator


@functools.cache
def load_schema() -> Mapping[str, Any]:
    with resources.files("infores").joinpath("schema.json").open("r", encoding="utf-8") as handle:
        data: Mapping[str, Any] = json.load(handle)
    return data


def schema_version() -> str:
    return str(load_schema().get("x-infores-schema-version", "unknown"))


@functools.cache
def result_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema())


@functools.cache
def defect_validator() -> Draft202012Validator:
    schema: Mapping[str, Any] = load_schema()
    return Draft202012Validator({"$ref": "#/$defs/defect", "$defs": schema["$defs"]})
