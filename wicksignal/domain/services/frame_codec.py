"""
WickSignal – Domain Service: Frame Codec
==========================================
Framing de longitud prefijada del protocolo de cotizaciones de TradingView.

FORMATO:
    ~m~<len>~m~<payload>

    len = longitud en BYTES (UTF-8) del payload, en decimal ASCII.
    payload típico = {"m": <función>, "p": [<argumentos>]}

ASIMETRÍA:
- Encode es estricto: un header exacto por payload, sin padding ni escapes.
- El loop de cotizaciones NO decodifica el header. Busca objetos JSON
  balanceados en todo el texto, porque el servidor multiplexa varios
  frames en un solo mensaje WebSocket. decode_frames() existe para
  quien necesite el split estricto.
"""

from __future__ import annotations

import json
import re
from typing import Any, List

from wicksignal.domain.exceptions.domain_errors import ProtocolMismatchError

FRAME_MARKER = "~m~"

# Ancho del header mínimo de un ping: "~m~N~m~" con N de un dígito
PING_HEADER_WIDTH = 7

_HEARTBEAT_RE = re.compile(r"~h~\d+")
_DECODER = json.JSONDecoder()


def encode_frame(payload: str) -> str:
    """Antepone el header ~m~<len>~m~ al payload."""
    length = len(payload.encode("utf-8"))
    return f"{FRAME_MARKER}{length}{FRAME_MARKER}{payload}"


def construct_message(func: str, params: List[Any]) -> str:
    """JSON compacto {"m": func, "p": params}."""
    return json.dumps({"m": func, "p": params}, separators=(",", ":"))


def create_message(func: str, params: List[Any]) -> str:
    """Mensaje completo listo para enviar: payload JSON con header."""
    return encode_frame(construct_message(func, params))


def decode_frames(raw: str) -> List[str]:
    """
    Split estricto de uno o más frames concatenados.

    Raises:
        ProtocolMismatchError: si el texto no es una secuencia de frames
            válida (header ausente, longitud no numérica o truncada).
    """
    data = raw.encode("utf-8")
    marker = FRAME_MARKER.encode("ascii")
    payloads: List[str] = []
    pos = 0

    while pos < len(data):
        if not data.startswith(marker, pos):
            raise ProtocolMismatchError(f"Header de frame ausente en posición {pos}")
        len_start = pos + len(marker)
        len_end = data.find(marker, len_start)
        if len_end == -1:
            raise ProtocolMismatchError("Header de frame sin cierre")
        length_text = data[len_start:len_end]
        if not length_text.isdigit():
            raise ProtocolMismatchError(f"Longitud de frame inválida: {length_text!r}")

        body_start = len_end + len(marker)
        body_end = body_start + int(length_text)
        if body_end > len(data):
            raise ProtocolMismatchError("Frame truncado")

        payloads.append(data[body_start:body_end].decode("utf-8"))
        pos = body_end

    return payloads


def extract_json_objects(raw: str) -> List[dict]:
    """
    Escanea el texto buscando objetos JSON balanceados.

    Tolera headers de frame intercalados: cada '{' es candidato, se
    intenta decodificar desde ahí y, si funciona, se salta al final del
    objeto. El último elemento es el objeto final del mensaje.
    """
    objects: List[dict] = []
    pos = raw.find("{")

    while pos != -1:
        try:
            obj, end = _DECODER.raw_decode(raw, pos)
        except ValueError:
            pos = raw.find("{", pos + 1)
            continue
        except RecursionError:
            # Anidamiento sin cierre: ningún '{' posterior puede cerrar antes
            break
        if isinstance(obj, dict):
            objects.append(obj)
        pos = raw.find("{", end)

    return objects


def keepalive_payload(raw: str) -> str:
    """Texto del ping sin el header de ancho fijo."""
    return raw[PING_HEADER_WIDTH:]


def is_heartbeat(payload: str) -> bool:
    """True si el payload tiene la forma ~h~<n> que manda el servidor."""
    return _HEARTBEAT_RE.fullmatch(payload) is not None
