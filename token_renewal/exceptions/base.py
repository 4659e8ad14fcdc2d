class TokenRenewalError(Exception):
    pass
