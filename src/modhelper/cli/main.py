"""modhelper CLI - Main entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from modhelper import __version__

console = Console()
logger = logging.getLogger(__name__)


class Context:
    def __init__(self, config_path: Path, build_dir: Path, maven_overrides: dict):
        self.config_path = config_path
        self.build_dir = build_dir
        self.maven_overrides = maven_overrides

    def load(self):
        """Load the project configuration, exiting on failure."""
        from modhelper.config.loader import ConfigError, load_project_config
        from modhelper.config.models import MavenConfig

        try:
            config = load_project_config(self.config_path)
        except ConfigError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise SystemExit(1)

        overrides = {k: v for k, v in self.maven_overrides.items() if v}
        if overrides:
            base = config.maven.model_dump() if config.maven else {}
            config = config.model_copy(
                update={"maven": MavenConfig(**{**base, **overrides})}
            )
        return config


pass_context = click.make_pass_decorator(Context)


@click.group()
@click.version_option(version=__version__, prog_name="modhelper")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default="modhelper.yaml",
    show_default=True,
    help="Project configuration file.",
)
@click.option(
    "--build-dir",
    type=click.Path(path_type=Path),
    default="build",
    show_default=True,
    help="Build output directory.",
)
@click.option("--maven-url", envvar="MAVEN_URL", default=None, help="Maven repository URL.")
@click.option("--maven-user", envvar="MAVEN_USER", default=None, help="Maven username.")
@click.option(
    "--maven-password", envvar="MAVEN_PASSWORD", default=None, help="Maven password."
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx, config_path, build_dir, maven_url, maven_user, maven_password, verbose):
    """modhelper - metadata and packaging helper for NeoForge mod builds."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Context(
        config_path=config_path,
        build_dir=build_dir,
        maven_overrides={"url": maven_url, "user": maven_user, "password": maven_password},
    )


@cli.command()
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path),
    default=None,
    help="Resources directory (default: <build-dir>/generated/resources).",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print instead of writing.")
@pass_context
def manifest(obj, output_dir, to_stdout):
    """Generate META-INF/neoforge.mods.toml."""
    from modhelper.config.loader import ConfigError
    from modhelper.manifest.generator import ManifestGenerator

    config = obj.load()
    generator = ManifestGenerator(config)
    try:
        if to_stdout:
            click.echo(generator.render(), nl=False)
            return
        path = generator.write(output_dir or obj.build_dir / "generated" / "resources")
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
    except OSError as e:
        console.print(f"[red]Failed to write manifest: {escape(str(e))}[/red]")
        raise SystemExit(1)
    console.print(f"Manifest written to [green]{path}[/green]")


@cli.command("ci-output")
@click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    type=click.Path(path_type=Path),
    default=None,
    help="Step output file (default: $GITHUB_OUTPUT).",
)
@pass_context
def ci_output(obj, github_output):
    """Append mod id and versions to the GitHub Actions output file."""
    from modhelper.ci.github_output import GitHubOutputWriter, ci_output_values

    config = obj.load()
    writer = GitHubOutputWriter(github_output)
    if not writer.enabled:
        console.print("[yellow]No GitHub output file configured, nothing written.[/yellow]")
        return
    try:
        writer.write(ci_output_values(config))
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
    except OSError as e:
        console.print(f"[red]Failed to write CI output: {escape(str(e))}[/red]")
        raise SystemExit(1)
    console.print(f"CI outputs appended to [green]{github_output}[/green]")


@cli.command()
@click.option(
    "--classifier",
    type=click.Choice(["", "sources", "javadoc"]),
    default="",
    help="Archive classifier.",
)
@click.option("--mf", "as_mf", is_flag=True, help="Print raw MANIFEST.MF text.")
@pass_context
def attributes(obj, classifier, as_mf):
    """Show the archive manifest attributes."""
    from modhelper.archive.attributes import build_archive_attributes, render_manifest_mf

    config = obj.load()
    attrs = build_archive_attributes(config, classifier)
    if as_mf:
        click.echo(render_manifest_mf(attrs), nl=False)
        return

    table = Table(title=f"Archive attributes ({classifier or 'main'})")
    table.add_column("Attribute", style="cyan")
    table.add_column("Value")
    for key, value in attrs.items():
        table.add_row(key, value)
    console.print(table)


@cli.command("publish-target")
@pass_context
def publish_target(obj):
    """Show where the publication would be uploaded."""
    from modhelper.publishing.target import resolve_publish_target

    config = obj.load()
    target = resolve_publish_target(config, obj.build_dir)
    if target.local:
        console.print(f"Local repository: [yellow]{target.url}[/yellow]")
    else:
        console.print(f"Remote repository: [green]{target.url}[/green] (user {target.username})")


@cli.command()
@pass_context
def pom(obj):
    """Print the POM of the Maven publication."""
    from modhelper.publishing.pom import build_publication, render_pom

    config = obj.load()
    click.echo(render_pom(build_publication(config), display_name=config.name), nl=False)


@cli.command("minify-json")
@click.argument("directory", type=click.Path(exists=True, file_okay=False, path_type=Path))
def minify_json(directory):
    """Compact every JSON file below DIRECTORY."""
    from modhelper.resources.json_minify import ResourceProcessingError, minify_json_resources

    try:
        files = minify_json_resources(directory)
    except ResourceProcessingError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
    console.print(f"Minified [green]{len(files)}[/green] JSON files")


@cli.command()
@click.option(
    "--github-output",
    envvar="GITHUB_OUTPUT",
    type=click.Path(path_type=Path),
    default=None,
    help="Step output file (default: $GITHUB_OUTPUT).",
)
@pass_context
def build(obj, github_output):
    """Run every metadata step for the project."""
    from modhelper.config.loader import ConfigError
    from modhelper.orchestrator import BuildOrchestrator
    from modhelper.resources.json_minify import ResourceProcessingError

    config = obj.load()
    orchestrator = BuildOrchestrator(
        config,
        obj.build_dir,
        github_output=github_output,
        project_dir=obj.config_path.parent,
    )
    try:
        result = orchestrator.run()
    except (ConfigError, ResourceProcessingError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
    except OSError as e:
        console.print(f"[red]Build step failed: {escape(str(e))}[/red]")
        raise SystemExit(1)

    console.print(f"[bold]Built metadata for {config.id} {config.full_version}[/bold]")
    if result.license_path:
        console.print(f"  License: {result.license_path}")
    if result.manifest_path:
        console.print(f"  Manifest: {result.manifest_path}")
    if result.ci_output_path:
        console.print(f"  CI outputs: {result.ci_output_path}")
    console.print(f"  Archive manifests: {len(result.archive_manifests)}")
    console.print(f"  POM: {result.pom_path}")
    where = "local" if result.publish_target.local else "remote"
    console.print(f"  Publish target ({where}): {result.publish_target.url}")


if __name__ == "__main__":
    cli()
