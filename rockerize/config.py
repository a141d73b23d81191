from pydantic import BaseModel, ConfigDict, Field


class RockerizeConfig(BaseModel):
    """Configuration settings for building and running rockerized images."""

    model_config = ConfigDict(frozen=True)

    # Engine settings
    engine_bin: str = Field(default="docker", description="Container engine binary name.")
    image_name_prefix: str = Field(default="rockerized", description="Prefix of built image names.")
    image_tag: str = "latest"

    # Build definition settings
    definition_filename: str = Field(default="Dockerfile.rockerize", description="Temporary build definition file.")
    builder_image: str = Field(default="rust:alpine", description="Toolchain image for the build stage.")
    maintainer: str = "meinside@gmail.com"

    # Project descriptor settings
    descriptor_filename: str = "Cargo.toml"
    descriptor_section: str = "package"
    descriptor_key: str = "name"

    def image_name(self, binary_name: str) -> str:
        """
        Generate the image name for a binary.

        Args:
            binary_name: Name of the application binary

        Returns:
            Image name in format: {prefix}-{binary_name}:{tag}
        """
        return f"{self.image_name_prefix}-{binary_name}:{self.image_tag}"
