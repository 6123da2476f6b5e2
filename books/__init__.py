"""Personal book catalogue backed by ISBNdb lookups and a local SQLite store"""
