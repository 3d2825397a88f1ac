"""Domain layer for flatcache."""
