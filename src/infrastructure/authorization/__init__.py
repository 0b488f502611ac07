"""Authorization infrastructure package.

Casbin-based policy engine:
- model.conf: deny-override, attribute-aware model
- conditions.py: named rule conditions (ownership)
- rules.py: Rule / RuleSet records
- rule_table.py: static role -> rule table
- casbin_policy.py: CasbinPolicy implementing PolicyProtocol
"""
