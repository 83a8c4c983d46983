"""Query engine, session state, source retrieval and load orchestration."""
