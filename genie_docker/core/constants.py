"""Constants used throughout Genie Docker."""


# Dockerfile defaults
DOCKERFILE_NAME = "Dockerfile"
DEFAULT_BASE_IMAGE = "julia:latest"
DEFAULT_PLATFORM = "linux/amd64"
DEFAULT_USER = "genie"
DEFAULT_ENV = "dev"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_DOCKERPORT = 80

# Scripts shipped by the Genie app scaffold
APP_SCRIPTS = ["bin/repl", "bin/server", "bin/runtask"]
START_COMMAND = "bin/server"

# Package bootstrap run inside the image
PACKAGE_BOOTSTRAP = 'julia -e "using Pkg; Pkg.activate(\\".\\"); Pkg.instantiate(); Pkg.precompile(); "'

# Build / run defaults
DEFAULT_APPNAME = "genie"
DEFAULT_IMAGE = "genie"
DEFAULT_CONTAINER_NAME = "genieapp"
DEFAULT_APPDIR = "/home/genie/app"
DEFAULT_HOSTPORT = 80
DEFAULT_CONTAINERPORT = 8000

# Docker CLI
DOCKER_EXECUTABLE = "docker"
SUDO_EXECUTABLE = "sudo"

# Project configuration
CONFIG_FILE_NAME = "genie-docker.yml"
