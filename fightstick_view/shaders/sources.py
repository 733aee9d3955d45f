"""
Shader source code for the overlay renderer
"""

# Solid colored geometry (circles, trail lines)
SHAPE_VERTEX_SHADER = """
#version 330 core
layout (location = 0) in vec2 aPos;
layout (location = 1) in vec4 aColor;
out vec4 Color;
uniform mat4 projection;
void main() {
    gl_Position = projection * vec4(aPos, 0.0, 1.0);
    Color = aColor;
}
"""

SHAPE_FRAGMENT_SHADER = """
#version 330 core
in vec4 Color;
out vec4 FragColor;
void main() { FragColor = Color; }
"""

# Textured quads (PIL-rendered text)
TEXT_VERTEX_SHADER = """
#version 330 core
layout (location = 0) in vec2 aPos;
layout (location = 1) in vec2 aTexCoord;
out vec2 TexCoord;
uniform mat4 projection;
void main() {
    gl_Position = projection * vec4(aPos, 0.0, 1.0);
    TexCoord = aTexCoord;
}
"""

TEXT_FRAGMENT_SHADER = """
#version 330 core
in vec2 TexCoord;
out vec4 FragColor;
uniform sampler2D texture0;
void main() {
    FragColor = texture(texture0, TexCoord);
    if (FragColor.a < 0.01) discard;
}
"""
