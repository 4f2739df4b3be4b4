"""
Domain Services

Business logic for WSDL/XSD schema graphs. The schema package resolves a
root document and its imports/includes into one queryable graph.
"""
