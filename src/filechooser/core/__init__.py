"""Navigation state, directory listing and breadcrumb logic."""
