"""Query-string construction for service requests."""

from typing import Mapping

import httpx

from .interface import ParamValue


def build_query(params: Mapping[str, ParamValue]) -> str:
    """Serialize parameters as ``key=value`` pairs joined by ``&``.

    Pairs keep the mapping's insertion order. Values are percent-encoded, so a
    value containing ``&``, ``=``, ``%`` or a space cannot split into extra
    parameters.
    """
    return str(httpx.QueryParams(dict(params)))
