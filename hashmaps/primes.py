def is_prime(n: int) -> bool:
    """Trial division by odd divisors up to sqrt(n)"""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def next_prime(n: int) -> int:
    """Return the smallest prime greater than or equal to n, or 2 if n <= 1"""
    if n <= 1:
        return 2
    while not is_prime(n):
        n += 1
    return n
