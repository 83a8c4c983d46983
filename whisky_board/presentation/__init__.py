"""Terminal presentation of query-engine output."""
