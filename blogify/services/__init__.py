"""
Service layer for blogify.

Services validate input, talk to the ORM and raise
``blogify.exceptions.BlogifyError`` subclasses; views turn those into
responses.
"""
