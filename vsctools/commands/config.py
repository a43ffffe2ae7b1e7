import click
import json


@click.command("config")
@click.option('--as-json', is_flag=True, default=False, help='Show config properties as JSON')
@click.pass_context
def cmd(ctx, as_json):
    """
    Display current configuration properties. The token is shown masked.
    """
    config = ctx.find_root().obj["config"]
    props = config.list_properties()

    if as_json:
        click.echo(json.dumps(props, indent=2, default=str))
    else:
        click.echo("Configuration Properties:")
        for k, v in props.items():
            click.echo(f"{k}: {v}")
