"""Core lingssg library: transcoding, pages, templates and site building."""
