"""Reading SRX 2.0 XML documents into plain rule table data."""

from typing import Any, Dict, List, Optional, Union
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as DET

class SrxFormatError(ValueError):
    """The document is not well-formed XML or not a usable SRX document."""
    pass

def _local(tag: str) -> str:
    """Tag name without its namespace."""
    return tag.rsplit("}", 1)[-1]

def _child(element: Element, name: str) -> Optional[Element]:
    for child in element:
        if _local(child.tag) == name:
            return child
    return None

def _children(element: Element, name: str) -> List[Element]:
    return [child for child in element if _local(child.tag) == name]

def _required(element: Element, name: str) -> Element:
    found = _child(element, name)
    if found is None:
        raise SrxFormatError(f"<{_local(element.tag)}> is missing <{name}>")
    return found

def _attribute(element: Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise SrxFormatError(f"<{_local(element.tag)}> is missing the '{name}' attribute")
    return value

def _pattern(rule: Element, name: str) -> Optional[str]:
    found = _child(rule, name)
    if found is None or not found.text:
        return None
    return found.text

def srx_to_dict(content: Union[str, bytes]) -> Dict[str, Any]:
    """
    Convert an SRX document into the rule table mapping.
    
    Markup directives (<formathandle>, segmentsubflows) are ignored. Boolean
    tokens are passed through as strings and checked by the schema.
    
    Args:
        content: SRX XML as text or bytes
        
    Returns:
        Dict: Data accepted by RuleTable.model_validate
        
    Raises:
        SrxFormatError: If the XML is malformed or required SRX parts are missing
    """
    try:
        root = DET.fromstring(content)
    except (ParseError, DefusedXmlException) as e:
        raise SrxFormatError(f"Invalid XML: {e}") from e

    if _local(root.tag) != "srx":
        raise SrxFormatError(f"Root element must be <srx>, got <{_local(root.tag)}>")

    header = _required(root, "header")
    body = _required(root, "body")

    language_rules: Dict[str, List[Dict[str, Any]]] = {}
    for language_rule in _children(_required(body, "languagerules"), "languagerule"):
        name = _attribute(language_rule, "languagerulename")
        if name in language_rules:
            raise SrxFormatError(f"Duplicate <languagerule> named {name!r}")
        language_rules[name] = [
            {
                "break": rule.get("break", "yes"),
                "before_break": _pattern(rule, "beforebreak"),
                "after_break": _pattern(rule, "afterbreak"),
            }
            for rule in _children(language_rule, "rule")
        ]

    language_map = [
        {
            "pattern": _attribute(entry, "languagepattern"),
            "language": _attribute(entry, "languagerulename"),
        }
        for entry in _children(_required(body, "maprules"), "languagemap")
    ]

    return {
        "version": root.get("version", "2.0"),
        "cascade": _attribute(header, "cascade"),
        "language_map": language_map,
        "language_rules": language_rules,
    }
