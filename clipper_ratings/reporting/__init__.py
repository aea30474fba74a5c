"""
Reporting for the ratings prompt engine.

Offline export of logged diagnostic events.
"""
