"""
Duty type and POPIMAR classification

Duty type tags what kind of provision a clause is (a duty, a right, a
definition, a scope statement, ...). POPIMAR tags which stage of the
Policy-Organise-Plan-Implement-Monitor-Audit-Review cycle it feeds.

Several duty type rules share a label, so a clause can be tagged
"Duty, Duty". Labels containing commas are quoted for the host's
multi-select parser.
"""
from typing import Any, Mapping

from ..utils.records import text
from .rules import table, tag

TEXT_FIELD = "Text"

INTERPRETATION = '"Interpretation, Definition"'
APPLICATION = '"Application, Scope"'
APPEALS = '"Defence, Exemptions, Appeals"'
PERMIT = '"Permit, Authorisation, License"'


DUTY_TYPE_RULES = table([
    (r"[ ][Nn]o[ ]person[ ]shall", "Duty"),
    (r"[ ][Tt]he[ ]person.*?must[ ]use", "Duty"),
    (r"[ ][Tt]he[ ]person.*?shall", "Duty"),
    (r"[ ][Pp]erson[ ](?:shall[ ]notify|shall[ ]furnish[ ]the[ ]authority)]", "Duty"),
    (r"[ ]A[ ]person[ ]shall[ ]not", "Duty"),
    (r"[ ]shall[ ]be[ ]the[ ]duty[ ]of[ ]any[ ]person", "Duty"),
    (r"[ ][Pp]erson[ ]*?may[ ]at[ ]any[ ]time]", "Right"),
    (r"[a-z]”[ ](?:means|includes|has?v?e?[ ]the[ ](?:same )?meanings?|is|are[ ]to[ ]be[ ]read[ ]as)[ —]", INTERPRETATION),
    (r"[ ]has?v?e?[ ]the[ ](?:same )?meanings?[ ]as", INTERPRETATION),
    (r"[ ]any[ ]reference[ ]in[ ]this[ ].*?to", INTERPRETATION),
    (r"[ ][Ff]or[ ]the[ ]purposes[ ]of.*?[ ](?:Part|Chapter|[sS]ection|subsection)", INTERPRETATION),
    (r"[ ]This[ ](?:Part|Chapter|[Ss]ection)[ ]applies", APPLICATION),
    (r"[ ]This[ ](?:Part|Chapter|[Ss]ection)[ ]does[ ]not[ ]apply", APPLICATION),
    (r"[ ]does[ ]not[ ]apply", APPLICATION),
    (r"[ ][Aa]ppeal[ ]", APPEALS),
    (r"[ ][Oo]ffence[ ]|[ ]fixed[ ]penalty", "Offences"),
    (r"shall not[ ]", "Exemption"),
])

POPIMAR_RULES = table([
    (r"[ “][Pp]ermit[ \.,:;”]|[ ][Aa]uthorisation[ \.,:;”]|[Ll]i[sc]en[sc]e", PERMIT),
    (r"[ “][Cc]hecki?n?g?[ \.,:;”]|[ ][Mm]onitori?n?g?[ \.,:;”]", "Monitor"),
    (r"[ “][Rr]eviewi?n?g?[ \.,:;”]", "Review"),
])


def duty_types(record: Mapping[str, Any]) -> str:
    return tag(text(record, TEXT_FIELD), DUTY_TYPE_RULES)


def popimar(record: Mapping[str, Any]) -> str:
    return tag(text(record, TEXT_FIELD), POPIMAR_RULES)
