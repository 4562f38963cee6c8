# finance_tracker/controllers/__init__.py
"""
Pipeline stages: filtering, aggregation, view composition, export
orchestration, delivery and loading. Import the submodules directly.
"""
