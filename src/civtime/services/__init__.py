"""Service layer — structured results over the pure domain.

Services never raise for user input; failures come back as ServiceResult.
"""
