"""JSON parser that keeps JSON numbers exact.

DRF's stock ``JSONParser`` turns ``29.99`` into a ``float``; prices must
never pass through binary floating point, so numbers with a fractional
part or exponent are decoded straight into ``Decimal``.
"""

import codecs
import json
from decimal import Decimal

from django.conf import settings
from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser
from rest_framework.utils.json import strict_constant


class DecimalJSONParser(JSONParser):
    def parse(self, stream, media_type=None, parser_context=None):
        parser_context = parser_context or {}
        encoding = parser_context.get("encoding", settings.DEFAULT_CHARSET)

        try:
            decoded_stream = codecs.getreader(encoding)(stream)
            parse_constant = strict_constant if self.strict else None
            return json.load(
                decoded_stream, parse_float=Decimal, parse_constant=parse_constant
            )
        except ValueError as exc:
            raise ParseError(f"JSON parse error - {exc}") from exc
