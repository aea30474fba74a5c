"""
Ratings prompt policy.

- versions: "X.Y.Z" parsing and comparison
- delays: pure predicates for the bad rating and usage windows
- client_config: per-client setting names and lookups
- eligibility: the should-show decision, cached per session
- bad_rating: recording bad ratings and the do-not-prompt flag
- prompt_flow: prompt stages driven by the user's answer
"""
