"""
Duty holder classification

Assigns the roles a legal provision places duties on (Employer, Worker,
Operator, ...) by scanning the provision text against a rule table.

Three tables are in use:

  DUTYHOLDER_RULES           UK register, whole words only ([ “]X[ .,:;”])
  BASELINE_DUTYHOLDER_RULES  UK baseline pasting tool, plain substrings
  RUS_DUTYHOLDER_RULES       Russian register, English translation field
"""
from typing import Any, Mapping

from ..utils.records import text
from .rules import table, tag

TEXT_FIELD = "Text"
BASELINE_TEXT_FIELD = "paste_text_here"
RUS_TEXT_FIELD = "text_en_🏴󠁧󠁢󠁥󠁮󠁧󠁿️"

# Word start / word end as written in the register formulas
_S = r"[ “]"
_E = r"[ \.,:;”]"


# =============================================================================
# UK register
# =============================================================================

DUTYHOLDER_RULES = table([
    (rf"{_S}[Ii]nvestor{_E}", "Investor"),
    (rf"{_S}[Oo]wner{_E}", "Owner"),
    (rf"{_S}[Ll]essee{_E}", "Lessee"),
    (rf"{_S}[Oo]ccupier{_E}|[Pp]erson[ ]who[ ]is[ ]in[ ]occupation", "Occupier"),
    (rf"{_S}[Ee]mployer{_E}", "Employer"),
    (rf"{_S}[Cc]ompany{_E}|[ ][Bb]usiness{_E}|[ ][Oo]rganisation{_E}|[ ][Ee]nterprise{_E}", "Company"),
    (rf"{_S}[Ee]mployee{_E}", "Employee"),
    (rf"{_S}[Ww]orker{_E}", "Worker"),
    (rf"{_S}[Aa]ppropriate[ ][Pp]erson{_E}", "Appropriate Person"),
    (rf"{_S}[Rr]esponsible[ ][Pp]erson{_E}", "Responsible Person"),
    (rf"{_S}[Cc]ompetent[ ][Pp]erson{_E}", "Competent Person"),
    (rf"{_S}[Aa]uthorised[ ][Pp]erson{_E}|[Aa]uthorised [Bb]ody{_E}", "Authorised Person"),
    (rf"{_S}[Aa]ppointed[ ][Pp]erson{_E}", "Appointed Person"),
    (rf"{_S}[Rr]elevant[ ][Pp]erson", "Relevant Person"),
    (rf"{_S}[Hh]older{_E}", "Holder"),
    (rf"{_S}[Dd]uty[ ][Hh]older{_E}", "Duty Holder"),
    (rf"{_S}[Pp]erson{_E}|[Ee]veryone{_E}|[Cc]itizen{_E}", "Person"),
    (rf"{_S}[Aa]dvis[oe]r{_E}", "Advisor"),
    (rf"{_S}[Nn]urse{_E}|[Pp]hysician{_E}|[Dd]octor{_E}", "OH Advisor"),
    (rf"{_S}[Rr]epresentative{_E}", "Representative"),
    (rf"{_S}[Tt]rade[ ][Uu]nion{_E}", "TU"),
    (rf"{_S}[Aa]gent?s{_E}", "Agent"),
    (rf"{_S}Secretary[ ]of[ ]State{_E}|{_S}[Mm]iniste?ry?{_E}", "Minister"),
    (rf"{_S}[Rr]egulators?{_E}", "Regulator"),
    (rf"{_S}[Ll]ocal[ ][Aa]uthority?i?e?s?{_E}", "Regulator"),
    (rf"{_S}[Rr]egulati?on?r?y?[ ][Aa]uthority?i?e?s?{_E}", "Regulator"),
    (rf"{_S}[Ee]nforce?(?:ment|ing)[ ][Aa]uthority?i?e?s?{_E}", "Regulator"),
    (rf"{_S}[Aa]uthorised[ ][Oo]fficer{_E}", "Officer"),
    (rf"{_S}[Pp]rincipal[ ][Dd]esigner{_E}", "Principal Designer"),
    (rf"{_S}[Dd]esigner{_E}", "Designer"),
    (rf"{_S}[Cc]onstructor{_E}", "Constructor"),
    (rf"{_S}[Mm]anufacturer{_E}", "Manufacturer"),
    (rf"{_S}[Pp]roducer{_E}|person[ ]who.*?produces*?[—\.]", "Producer"),
    (rf"{_S}[Aa]dvertiser{_E}|[Mm]arketer{_E}", "Marketer"),
    (rf"{_S}[Ss]upplier{_E}", "Supplier"),
    (rf"{_S}[Dd]istributor{_E}", "Distributor"),
    (rf"{_S}[Ss]eller{_E}", "Seller"),
    (rf"{_S}[Rr]etailer{_E}", "Retailer"),
    (rf"{_S}[Ss]torer{_E}", "Storer"),
    (rf"{_S}[Cc]onsignor{_E}", "Consignor"),
    (rf"{_S}[Hh]andler{_E}", "Handler"),
    (rf"{_S}[Cc]onsignee{_E}", "Consignee"),
    (rf"{_S}[Tt]ransporter{_E}|person[ ]who.*?carries[—\.]", "Carrier"),
    (rf"{_S}[Dd]river{_E}", "Driver"),
    (rf"{_S}[Ii]mporter{_E}|person[ ]who.*?imports*?[—\.]", "Importer"),
    (rf"{_S}[Ee]xporter{_E}|person[ ]who.*?exports*?[—\.]", "Exporter"),
    (rf"{_S}[Ii]nstaller{_E}", "Installer"),
    (rf"{_S}[Mm]aintainer{_E}", "Maintainer"),
    (rf"{_S}[Rr]epairer{_E}", "Repairer"),
    (rf"{_S}[Pp]rincipal[ ][Cc]ontractor", "Principal Contractor"),
    (rf"{_S}[Cc]ontractor{_E}", "Contractor"),
    (rf"{_S}[Uu]ser{_E}", "User"),
    (rf"{_S}[Oo]perator{_E}|[Pp]erson[ ]who[ ]operates[ ]the[ ]plant", "Operator"),
    (r"[ ]person[ ]who.*?keeps*?[—\.]", "Keeper"),
    (rf"{_S}[Rr]euser{_E}", "Reuser"),
    (r"[ ]person[ ]who.*?treats*?[—\.]", "Treater"),
    (rf"{_S}[Rr]ecycler{_E}", "Recycler"),
    (rf"{_S}[Dd]isposer{_E}", "Disposer"),
    (rf"{_S}[Pp]olluter{_E}", "Polluter"),
    (rf"{_S}[Aa]ssessors?{_E}", "Assessor"),
    (rf"{_S}[Ii]nspector{_E}", "Inspector"),
])


# =============================================================================
# UK baseline paste tool (substring matching)
# =============================================================================

BASELINE_DUTYHOLDER_RULES = table([
    (r"[Ii]nvestor", "Investor"),
    (r"[Oo]wner", "Owner"),
    (r"[Oo]ccupier", "Occupier"),
    (r"[Ee]mployer", "Employer"),
    (r"[Cc]ompany|[Bb]usiness|[Oo]rganisation|[Ee]nterprise", "Company"),
    (r"[Ee]mployee", "Employee"),
    (r"[Ww]orker", "Worker"),
    (r"[Rr]esponsible[ ][Pp]erson", "Responsible Person"),
    (r"[Cc]ompetent[ ][Pp]erson", "Competent Person"),
    (r"[Aa]uthorised[ ][Pp]erson|[Aa]uthorised [Bb]ody", "Authorised Person"),
    (r"[Aa]ppointed[ ][Pp]erson", "Appointed Person"),
    (r"[Rr]elevant[ ][Pp]erson", "Relevant Person"),
    (r"[Dd]uty[ ][Hh]older", "Duty Holder"),
    (r"[Pp]erson|[Ee]veryone|[Cc]itizen", "Person"),
    (r"[Aa]dvis[oe]r", "Advisor"),
    (r"[Nn]urse|[Pp]hysician|[Dd]octor", "OH Advisor"),
    (r"[Rr]epresentative", "Representative"),
    (r"[Tt]rade[ ][Uu]nion", "TU"),
    (r"[Aa]gent[\s|\.]", "Agent"),
    (r"[Mm]iniste?ry?|[Rr]egulator\s?", "Ministry / Regulator"),
    (r"[Pp]rincipal[ ][Dd]esigner", "Principal Designer"),
    (r"[Dd]esigner", "Designer"),
    (r"[Cc]onstructor", "Constructor"),
    (r"[Mm]anufacturer", "Manufacturer"),
    (r"[Pp]roducer", "Producer"),
    (r"[Aa]dvertiser|[Mm]arketer", "Marketer"),
    (r"[Ss]upplier", "Supplier"),
    (r"[Dd]istributor", "Distributor"),
    (r"[Ss]eller", "Seller"),
    (r"[Rr]etailer", "Retailer"),
    (r"[Ss]torer", "Storer"),
    (r"[Cc]onsignor", "Consignor"),
    (r"[Hh]andler", "Handler"),
    (r"[Cc]onsignee", "Consignee"),
    (r"[Tt]ransporter", "Transporter"),
    (r"[Dd]river", "Driver"),
    (r"[Ii]mporter", "Importer"),
    (r"[Ee]xporter", "Exporter"),
    (r"[Ii]nstaller", "Installer"),
    (r"[Mm]aintainer", "Maintainer"),
    (r"[Rr]epairer", "Repairer"),
    (r"[Pp]rincipal[ ][Cc]ontractor", "Principal Contractor"),
    (r"[Cc]ontractor", "Contractor"),
    (r"[Uu]ser", "User"),
    (r"[Oo]perator", "Operator"),
    (r"[Rr]user", "Reuser"),
    (r"[Rr]ecycler", "Recycler"),
    (r"[Dd]isposer", "Disposer"),
    (r"[Pp]olluter", "Polluter"),
    (r"[Aa]ssessor[\s|\.]", "Assessor"),
    (r"[Ii]nspector", "Inspector"),
])


# =============================================================================
# Russian register
# =============================================================================

RUS_DUTYHOLDER_RULES = table([
    (r"[Ii]nvestor", "Investor"),
    (r"[Oo]wner", "Owner"),
    (r"[Oo]ccupier", "Occupier"),
    (r"[Ee]mployer", "Employer"),
    (r"[Cc]ompany|[Bb]usiness|[Oo]rganisation|[Ee]nterprise", "Company"),
    (r"[Ee]mployee", "Employee"),
    (r"[Ww]orker", "Worker"),
    (r"[Pp]erson|[Ee]veryone|[Cc]itizen", "Person"),
    (r"[Aa]dvis[oe]r", "Advisor"),
    (r"[Nn]urse|[Pp]hysician|[Dd]octor", "OH Advisor"),
    (r"[Rr]epresentative", "Rep"),
    (r"[Tt]rade[ ][Uu]nion", "TU"),
    (r"[Aa]gent[\s|\.]", "Agent"),
    (r"[Mm]iniste?ry?|[Rr]egulator\s?", "Ministry / Regulator"),
    (r"[Dd]esigner", "Designer"),
    (r"[Cc]onstructor", "Constructor"),
    (r"[Mm]anufacturer", "Manufacturer"),
    (r"[Pp]roducer", "Producer"),
    (r"[Aa]dvertiser|[Mm]arketer", "Marketer"),
    (r"[Ss]upplier", "Supplier"),
    (r"[Dd]istributor", "Distributor"),
    (r"[Ss]eller", "Seller"),
    (r"[Rr]etailer", "Retailer"),
    (r"[Ss]torer", "Storer"),
    (r"[Cc]onsignor", "Consignor"),
    (r"[Hh]andler", "Handler"),
    (r"[Cc]onsignee", "Consignee"),
    (r"[Tt]ransporter", "Transporter"),
    (r"[Dd]river", "Driver"),
    (r"[Ii]mporter", "Importer"),
    (r"[Ee]xporter", "Exporter"),
    (r"[Ii]nstaller", "Installer"),
    (r"[Mm]aintainer", "Maintainer"),
    (r"[Rr]epairer", "Repairer"),
    (r"[Cc]ontractor", "Contractor"),
    (r"[Uu]ser", "User"),
    (r"[Oo]perator", "Operator"),
    (r"[Rr]user", "Reuser"),
    (r"[Rr]ecycler", "Recycler"),
    (r"[Dd]isposer", "Disposer"),
    (r"[Pp]olluter", "Polluter"),
    (r"[Aa]uthorised [Pp]erson|[Aa]uthorised [Bb]ody", "Authorised Person"),
    (r"[Aa]ssessor[\s|\.]", "Assessor"),
    (r"[Ii]nspector", "Inspector"),
])


def dutyholders(record: Mapping[str, Any]) -> str:
    """Duty holders named in a UK register provision (``Text``)"""
    return tag(text(record, TEXT_FIELD), DUTYHOLDER_RULES)


def baseline_dutyholders(record: Mapping[str, Any]) -> str:
    """Duty holders for text pasted into the baseline tool"""
    return tag(text(record, BASELINE_TEXT_FIELD), BASELINE_DUTYHOLDER_RULES)


def rus_dutyholders(record: Mapping[str, Any]) -> str:
    """Duty holders in the English text of a Russian register provision"""
    return tag(text(record, RUS_TEXT_FIELD), RUS_DUTYHOLDER_RULES)
