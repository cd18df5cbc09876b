"""
Service layer abstraction.

Services encapsulate business rules.  They receive their storage and
other collaborators through the constructor, so API handlers and tests
can supply whichever ``BlogStore`` they need.
"""
