from ape.exceptions import ApeException


class DeploymentError(ApeException):
    """
    Raised when the deployment cannot be set up, before anything is sent
    to the network.
    """
