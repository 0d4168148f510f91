"""Application layer: session orchestration over the routing core."""
