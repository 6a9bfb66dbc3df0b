"""link_scout.crawler: seed discovery, script fetching and the bounded worker pool."""
