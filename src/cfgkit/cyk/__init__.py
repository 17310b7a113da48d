from cfgkit.cyk._cykalgo import CYK, RuleQuery, Table
