"""Sense Time Tracker package.

Feature modules (entries, reports, mail, pdf, tracker) follow the same split:
plain dataclass models, service functions/classes with the rules, and a thin
Flask controller layer on top.
"""
