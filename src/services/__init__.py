"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They depend on ports (interfaces) from core/, never on concrete
implementations from adapters/ or infrastructure/.

This layer contains:
- contents_manager: CRUD orchestration and title/genre filtering
- genres: Genre list computation for add/remove operations
"""
