"""Task storage backends."""
