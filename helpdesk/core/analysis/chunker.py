"""
Fixed-size text chunker.

Dependencies: None
System role: Splits analysis input into bounded, contiguous pieces
"""

DEFAULT_CHUNK_SIZE = 2000


def split_into_chunks(content: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """
    Partition text into consecutive pieces of at most chunk_size characters.

    Joining the returned chunks reproduces the input exactly. Input no
    longer than chunk_size (including the empty string) comes back as a
    single chunk.

    Args:
        content: Text to split
        chunk_size: Maximum characters per chunk

    Returns:
        list[str]: Ordered chunks, the last one possibly shorter

    Raises:
        ValueError: If chunk_size is not positive
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    if len(content) <= chunk_size:
        return [content]

    return [content[i:i + chunk_size] for i in range(0, len(content), chunk_size)]
