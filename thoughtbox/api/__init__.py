"""HTTP endpoints for Thoughtbox resources."""
