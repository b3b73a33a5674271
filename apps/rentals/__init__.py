"""Rentals app package.

This app encapsulates the heater rental domain: rental applications, the
reservation calendar of claimed dates and the service that commits a new
application together with its dates. A date can belong to at most one
application; the unique constraint on reserved dates enforces this under
concurrent submissions.
"""
