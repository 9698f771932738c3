"""
Service layer abstraction.

Each service encapsulates the validation rules for a domain and
delegates persistence to the repositories it was constructed with.
``create_app`` builds one instance of each service against a shared
pair of repositories.
"""
