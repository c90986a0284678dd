import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .errors import ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Check:
    """Um check com falha, como enviado pelo Consul quando um watch dispara."""

    node: str = ""
    check_id: str = ""
    name: str = ""
    status: str = ""
    notes: str = ""
    output: str = ""
    service_id: str = ""
    service_name: str = ""
    service_tags: Tuple[str, ...] = ()
    definition: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dict(cls, obj: Dict[str, Any], index: int = 0) -> "Check":
        values: Dict[str, Any] = {}
        for json_key, attr in _STRING_FIELDS:
            values[attr] = _as_string(_lookup(obj, json_key), json_key, index)
        values["service_tags"] = _as_tags(_lookup(obj, "ServiceTags"), index)
        values["definition"] = _as_mapping(_lookup(obj, "Definition"), index)
        return cls(**values)


# (chave JSON do Consul, atributo do Check)
_STRING_FIELDS = (
    ("Node", "node"),
    ("CheckID", "check_id"),
    ("Name", "name"),
    ("Status", "status"),
    ("Notes", "notes"),
    ("Output", "output"),
    ("ServiceID", "service_id"),
    ("ServiceName", "service_name"),
)


def _lookup(obj: Dict[str, Any], key: str) -> Any:
    # Chave exata tem prioridade; senão aceita variação de caixa ("node", "NODE")
    if key in obj:
        return obj[key]
    lowered = key.lower()
    for k, v in obj.items():
        if k.lower() == lowered:
            return v
    return None


def _json_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "null"


def _as_string(value: Any, key: str, index: int) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ParseError(f"check {index}: field {key} must be a string, got {_json_type(value)}")
    return value


def _as_tags(value: Any, index: int) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ParseError(f"check {index}: field ServiceTags must be an array, got {_json_type(value)}")
    return tuple(_as_string(tag, "ServiceTags", index) for tag in value)


def _as_mapping(value: Any, index: int) -> Mapping[str, Any]:
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, dict):
        raise ParseError(f"check {index}: field Definition must be an object, got {_json_type(value)}")
    return MappingProxyType(dict(value))


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant {name}")


def parse_checks(data: bytes) -> List[Check]:
    """
    Decodifica o corpo do watch (lista JSON de checks) em objetos Check,
    preservando a ordem original. Campos desconhecidos são ignorados e
    campos ausentes ficam com valor vazio. `null` no topo vira lista vazia.
    """
    try:
        raw = json.loads(data, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError e UnicodeDecodeError são subclasses de ValueError;
        # RecursionError vem de arrays/objetos aninhados demais
        raise ParseError(str(exc)) from exc

    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ParseError(f"expected a JSON array of checks, got {_json_type(raw)}")

    checks: List[Check] = []
    for index, item in enumerate(raw):
        if item is None:
            checks.append(Check())
            continue
        if not isinstance(item, dict):
            raise ParseError(f"check {index}: expected an object, got {_json_type(item)}")
        checks.append(Check.from_dict(item, index))

    logger.debug(f"{len(checks)} check(s) decodificado(s) do payload do watch")
    return checks
