import logging

logger = logging.getLogger(__name__)


def predicted_leftover(size_a, size_b):
    half = -(-(size_a + size_b) // 2)
    return max(0, size_a - half) + max(0, size_b - half)


def optimize_course_pairs(sizes):
    """
    For every course pick the partner it should alternate columns with.

    sizes: roster sizes in course order.
    Returns a list where entry i is the partner index for course i. The
    partner minimises the predicted leftover, then the size difference; the
    lowest index wins a full tie. With fewer than two courses the only
    answer is [0].
    """
    if len(sizes) < 2:
        return [0]

    pairs = []
    for i, size_i in enumerate(sizes):
        best_pair = None
        best_key = None
        for j, size_j in enumerate(sizes):
            if i == j:
                continue
            key = (predicted_leftover(size_i, size_j), abs(size_i - size_j))
            if best_key is None or key < best_key:
                best_key = key
                best_pair = j
        pairs.append(best_pair)

    logger.debug("Course pairs for sizes %s: %s", sizes, pairs)
    return pairs
