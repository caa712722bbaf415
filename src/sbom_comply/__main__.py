from sbom_comply.cli.main import app

app()
