# coding=utf-8
# Distributed under the MIT software license, see the accompanying
# file LICENSE or http://www.opensource.org/licenses/mit-license.php.


class WOTSException(Exception):
    pass


class ConfigurationError(WOTSException):
    """
    Invalid Winternitz parameter, unknown hash function, or key material whose
    shape does not match the configured parameters.
    """
    pass


class KeyReuseError(WOTSException):
    pass


class RandomnessUnavailableError(WOTSException):
    pass


class MalformedSignatureError(WOTSException):
    """
    The signature does not have the number or size of elements the
    parameters require. A well-formed but wrong signature is not an error,
    verify() just returns False.
    """
    pass
