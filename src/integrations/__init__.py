"""
Concrete transports for the domain Publisher contract.
"""
