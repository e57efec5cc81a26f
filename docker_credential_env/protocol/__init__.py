"""Docker credential helper wire protocol: payload models and action dispatch."""
