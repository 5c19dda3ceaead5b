# HTTP adapter for the swing structure engine.
