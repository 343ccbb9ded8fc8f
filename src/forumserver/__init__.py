"""Forum content service: threads and messages with paginated, filtered listing."""
