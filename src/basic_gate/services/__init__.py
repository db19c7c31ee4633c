"""
basic_gate.services

Service layer: concrete collaborators consumed by the gate.
"""

# Package marker.
