"""Classic data structures and algorithms: sorting, queues, stacks, linked lists, binary trees and stack-based problems."""

__version__ = "0.1.0"