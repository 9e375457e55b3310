"""Building blocks for a user-access gateway: framing, BCD encoding, message rings, timers, pools and workers."""

__version__ = "0.1.0"

__all__ = [
    "bcd",
    "block_pool",
    "connection",
    "file_writer",
    "framing",
    "info_mem",
    "msg_queue",
    "stopper",
    "timer",
    "worker",
]