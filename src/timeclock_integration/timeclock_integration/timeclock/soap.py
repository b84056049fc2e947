"""folhaPonto SOAP envelope building and response parsing.

Response shape::

    <soap:Envelope xmlns:soap="http://schemas.xmlsoap.org/soap/envelope/">
        <soap:Body>
            <ns2:folhaPontoResponse xmlns:ns2="http://folha.primews.com.br/">
                <return>
                    <cnpj>14.425.578/0001-02</cnpj>
                    <pis>12883990532</pis>
                    <itens>
                        <data>2015-07-01T00:00:00-03:00</data>
                        <htr>480</htr>
                        <intervalos>
                            <dataHora>2015-07-01T09:02:00-03:00</dataHora>
                            <rep/>
                            <tipo>MarcacaoGeoMobi</tipo>
                            <justificativa/>
                        </intervalos>
                    </itens>
                </return>
            </ns2:folhaPontoResponse>
        </soap:Body>
    </soap:Envelope>
"""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from typing import Optional

from ..core.constants import FOLHA_NAMESPACE, SOAP_ENV_NAMESPACE
from .model import DateRange, DayRecord, FolhaPontoResponse, Punch


def build_folha_ponto_envelope(date_range: DateRange, cpf: str, cnpj: str) -> bytes:
    envelope = ET.Element(f"{{{SOAP_ENV_NAMESPACE}}}Envelope")
    body = ET.SubElement(envelope, f"{{{SOAP_ENV_NAMESPACE}}}Body")
    operation = ET.SubElement(body, f"{{{FOLHA_NAMESPACE}}}folhaPonto")
    flt = ET.SubElement(operation, "filter")
    for tag, value in (
        ("dataHoraInicio", date_range.start.strftime("%Y-%m-%d")),
        ("dataHoraTermino", date_range.end.strftime("%Y-%m-%d")),
        ("cpf", cpf),
        ("cnpj", cnpj),
    ):
        ET.SubElement(flt, tag).text = value
    return ET.tostring(envelope, encoding="utf-8", xml_declaration=True)


def _text(el: Optional[ET.Element]) -> Optional[str]:
    if el is None or el.text is None:
        return None
    value = el.text.strip()
    return value or None


def _child_text(el: ET.Element, local_name: str) -> Optional[str]:
    # Children are unqualified in practice, but match any namespace.
    return _text(el.find(f"{{*}}{local_name}"))


def _to_float(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value.replace(",", "."))
    except ValueError:
        return None
    # NaN, infinities and negative totals are not worked time.
    if not math.isfinite(number) or number < 0:
        return None
    return number


def parse_envelope(content: bytes) -> ET.Element:
    """Parse raw response bytes. Raises ET.ParseError on malformed XML."""
    return ET.fromstring(content)


def find_fault(root: ET.Element) -> Optional[str]:
    """faultstring of a SOAP fault body, or None when the body is not a fault."""
    fault = root.find(".//{*}Fault")
    if fault is None:
        return None
    return _child_text(fault, "faultstring") or "Unknown SOAP fault"


def parse_folha_ponto(root: ET.Element) -> Optional[FolhaPontoResponse]:
    """Parsed ``return`` element, or None when the envelope carries none."""
    ret = root.find(".//{*}folhaPontoResponse/{*}return")
    if ret is None:
        ret = root.find(".//{*}return")
    if ret is None:
        return None

    days = []
    for item in ret.findall("{*}itens"):
        data = _child_text(item, "data")
        if not data:
            continue
        punches = tuple(
            Punch(
                data_hora=_child_text(iv, "dataHora") or "",
                tipo=_child_text(iv, "tipo"),
                rep=_child_text(iv, "rep"),
                justificativa=_child_text(iv, "justificativa"),
            )
            for iv in item.findall("{*}intervalos")
        )
        days.append(DayRecord(data=data, htr=_to_float(_child_text(item, "htr")), punches=punches))

    return FolhaPontoResponse(
        cnpj=_child_text(ret, "cnpj"),
        pis=_child_text(ret, "pis"),
        days=tuple(days),
    )
