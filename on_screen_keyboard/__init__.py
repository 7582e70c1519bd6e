"""On-screen keyboard for entering text into a field without a physical keyboard."""
