"""Row-major numeric grids with directional adjacency lookup."""
