"""
pydantic support for HexColor.

A HexColor field (de)serializes as a single string token:

>>> from pydantic import BaseModel
>>> class Text(BaseModel):
...     foreground: HexColor
...     background: HexColor
>>> Text.model_validate_json('{"foreground": "#fff", "background": "000"}').model_dump_json()
'{"foreground":"#FFFFFF","background":"#000000"}'

Parse failures surface as ``pydantic.ValidationError`` carrying the
``ParseHexColorError`` message. Requires the ``serde`` extra.
"""
from __future__ import annotations
from typing import Any

from pydantic_core import core_schema

from .colors.codec import format_hex, parse_hex
from .colors.hex_color import HexColor


def hex_color_schema(source: Any, handler: Any) -> core_schema.CoreSchema:
    from_str = core_schema.chain_schema([
        core_schema.str_schema(),
        core_schema.no_info_plain_validator_function(parse_hex),
    ])
    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema([
            core_schema.is_instance_schema(HexColor),
            from_str,
        ]),
        serialization=core_schema.plain_serializer_function_ser_schema(format_hex),
    )
