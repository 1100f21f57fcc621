"""Core application for the MedRecord entry point.

Holds the account model, the startup bootstrap, the middleware chain, the
API route table with its handler groups, and the fallback dispatcher that
serves uploads and the single-page app.
"""
