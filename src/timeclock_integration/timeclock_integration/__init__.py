"""Time clock integration package.

Imports daily worked-time totals from the Primeponto time-and-attendance web service
into the local ``time_clock`` table. Organized by feature modules (settings, users,
timeclock) with a thin Flask controller layer over service/repository layers.
"""
