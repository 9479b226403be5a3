"""
Booking lifecycle services
Pricing, validation, booking and payment state machines, and their collaborators
"""
