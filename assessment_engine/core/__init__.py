"""Configuration and logging shared by the assessment engines."""
