"""Console logging and wrappers around the external gh tool."""
