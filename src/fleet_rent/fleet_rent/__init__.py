"""Fleet Rent package.

Rent/payment status derivation for fleet drivers, organized by feature modules
(drivers, reports, adjustments, rent_status) with a thin Flask controller layer
on top of service/repository layers.
"""
