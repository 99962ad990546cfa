"""Query Amazon RDS through the Data API, resolving cluster and DB user from the account."""
