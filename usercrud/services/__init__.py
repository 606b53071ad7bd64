"""Services — imperative shell: business operations that orchestrate core rules and IO.

Invariants:
    - Services receive their collaborators (repository, clock) through the constructor
    - No HTTP concepts (status codes, requests) appear here
"""
