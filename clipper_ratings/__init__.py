"""
Clipper ratings prompt engine.

Decides whether a clipping client should ask the user to rate it:
- models: session, stored record, client and event data models
- policy: version comparison, delay predicates, eligibility, bad ratings, prompt flow
- utils: local storage, settings, event logging and clock adapters
- reporting: offline export of diagnostic events
"""
