"""Shared utilities used by datasources.

- http: pre-configured ``requests.Session`` (timeout, User-Agent, retry policy)
"""
