import click
from ape.cli import ConnectedProviderCommand

from deployment.deployer import publish_contract


@click.command(cls=ConnectedProviderCommand)
@click.argument("address")
def cli(provider, address):
    """
    Publish the source of a deployed Project to the network explorer.
    """
    publish_contract(provider.network, address)
    click.echo(f"Published {address} on {provider.network.choice}")
