# -*- coding: utf-8 -*-
"""Patrones para MATLAB, Ruby, Lua, WGSL y las tablas de constructos de Makefile/Dockerfile."""
from .base import table

MATLAB = table(
    input=[
        (r"\bload\s*\(|^\s*load\s+\w", "load", "MAT-file loader"),
        (r"importdata\s*\(", "importdata", "Generic data import"),
        (r"readtable\s*\(", "readtable", "Table reader"),
        (r"readmatrix\s*\(", "readmatrix", "Matrix reader"),
        (r"readcell\s*\(", "readcell", "Cell array reader"),
        (r"readtimetable\s*\(", "readtimetable", "Timetable reader"),
        (r"csvread\s*\(|dlmread\s*\(", "csvread", "Legacy delimited reader"),
        (r"xlsread\s*\(", "xlsread", "Legacy Excel reader"),
        (r"textscan\s*\(", "textscan", "Formatted text reader"),
        (r"fileread\s*\(", "fileread", "Whole-file text reader"),
        (r"jsondecode\s*\(", "jsondecode", "JSON decoder"),
        (r"\bfopen\s*\([^)]*['\"]r", "fopen", "Low-level file open for reading"),
        (r"\bfgetl\s*\(|\bfgets\s*\(", "fgetl", "Line read"),
        (r"imread\s*\(", "imread", "Image reader"),
        (r"audioread\s*\(", "audioread", "Audio reader"),
        (r"VideoReader\s*\(", "VideoReader", "Video reader"),
        (r"h5read\s*\(", "h5read", "HDF5 reader"),
        (r"ncread\s*\(", "ncread", "NetCDF reader"),
        (r"webread\s*\(", "webread", "HTTP GET"),
    ],
    output=[
        (r"\bsave\s*\(|^\s*save\s+\w", "save", "MAT-file saver"),
        (r"writetable\s*\(", "writetable", "Table writer"),
        (r"writematrix\s*\(", "writematrix", "Matrix writer"),
        (r"writecell\s*\(", "writecell", "Cell array writer"),
        (r"csvwrite\s*\(|dlmwrite\s*\(", "csvwrite", "Legacy delimited writer"),
        (r"xlswrite\s*\(", "xlswrite", "Legacy Excel writer"),
        (r"jsonencode\s*\(", "jsonencode", "JSON encoder"),
        (r"\bfopen\s*\([^)]*['\"][wa]", "fopen (write)", "Low-level file open for writing"),
        (r"\bfprintf\s*\(", "fprintf", "Formatted write"),
        (r"\bfwrite\s*\(", "fwrite", "Binary write"),
        (r"imwrite\s*\(", "imwrite", "Image writer"),
        (r"audiowrite\s*\(", "audiowrite", "Audio writer"),
        (r"VideoWriter\s*\(", "VideoWriter", "Video writer"),
        (r"h5write\s*\(", "h5write", "HDF5 writer"),
        (r"savefig\s*\(", "savefig", "Figure saver"),
        (r"saveas\s*\(", "saveas", "Figure export"),
        (r"exportgraphics\s*\(", "exportgraphics", "Graphics export"),
        (r"\bprint\s*\(\s*['\"]-d", "print", "Figure print to file"),
    ],
    dependency=[
        (r"\brun\s*\(|^\s*run\s+\w", "run", "Run script"),
        (r"addpath\s*\(", "addpath", "Add to search path"),
        (r"^\s*import\s+[\w.]+", "import", "Package import"),
    ],
)

RUBY = table(
    input=[
        (r"File\.read\s*\(", "File.read", "Whole-file read"),
        (r"File\.readlines\s*\(", "File.readlines", "Line array read"),
        (r"File\.foreach\s*\(", "File.foreach", "Line iterator"),
        (r"File\.open\s*\([^)]*['\"]r", "File.open", "File open for reading"),
        (r"IO\.read\s*\(|IO\.readlines\s*\(", "IO.read", "IO read"),
        (r"Dir\.glob\s*\(|Dir\[", "Dir.glob", "Directory glob"),
        (r"CSV\.read\s*\(", "CSV.read", "CSV reader"),
        (r"CSV\.foreach\s*\(", "CSV.foreach", "CSV row iterator"),
        (r"CSV\.parse\s*\(", "CSV.parse", "CSV string parser"),
        (r"JSON\.parse\s*\(", "JSON.parse", "JSON parser"),
        (r"JSON\.load_file\s*\(", "JSON.load_file", "JSON file loader"),
        (r"YAML\.load_file\s*\(", "YAML.load_file", "YAML file loader"),
        (r"YAML\.safe_load\s*\(|YAML\.load\s*\(", "YAML.load", "YAML parser"),
        (r"Marshal\.load\s*\(", "Marshal.load", "Object deserialization"),
        (r"Nokogiri::\w+\s*\(", "Nokogiri", "XML/HTML parser"),
        (r"\.find\s*\(", "Model.find", "ActiveRecord lookup"),
        (r"\.find_by\w*\s*\(", "Model.find_by", "ActiveRecord attribute lookup"),
        (r"\.where\s*\(", "Model.where", "ActiveRecord query"),
        (r"\.all\b", "Model.all", "ActiveRecord full scan"),
        (r"params\[", "params[]", "Rails request parameters"),
        (r"params\.require\s*\(|params\.permit\s*\(", "params.require", "Rails strong parameters"),
        (r"request\.body", "request.body", "Rack request body"),
        (r"ENV\[|ENV\.fetch\s*\(", "ENV[]", "Environment variable"),
        (r"Net::HTTP\.get\w*\s*\(", "Net::HTTP.get", "Net::HTTP GET"),
        (r"HTTParty\.get\s*\(", "HTTParty.get", "HTTParty GET"),
        (r"Faraday\.get\s*\(|conn\.get\s*\(", "Faraday.get", "Faraday GET"),
        (r"open-uri|URI\.open\s*\(", "URI.open", "open-uri read"),
        (r"\bgets\b|STDIN\.read|\$stdin", "STDIN", "Standard input"),
    ],
    output=[
        (r"File\.write\s*\(", "File.write", "Whole-file write"),
        (r"File\.open\s*\([^)]*['\"][wa]", "File.open (write)", "File open for writing"),
        (r"IO\.write\s*\(", "IO.write", "IO write"),
        (r"FileUtils\.(mkdir_p|cp|mv)\s*\(?", "FileUtils", "File system operations"),
        (r"CSV\.open\s*\([^)]*['\"]w", "CSV.open", "CSV writer"),
        (r"\.to_csv\b", "to_csv", "CSV serialization"),
        (r"JSON\.generate\s*\(|JSON\.pretty_generate\s*\(", "JSON.generate", "JSON generator"),
        (r"\.to_json\b", "to_json", "JSON serialization"),
        (r"YAML\.dump\s*\(|\.to_yaml\b", "YAML.dump", "YAML serializer"),
        (r"Marshal\.dump\s*\(", "Marshal.dump", "Object serialization"),
        (r"render\s+json:", "render json:", "Rails JSON response"),
        (r"render\s+\w+:|render\s*\(", "render", "Rails template render"),
        (r"send_file\s*\(?", "send_file", "Rails file download"),
        (r"send_data\s*\(?", "send_data", "Rails data download"),
        (r"redirect_to\b", "redirect_to", "Rails redirect"),
        (r"\.create!?\s*\(", "Model.create", "ActiveRecord create"),
        (r"\.save!?\b", "model.save", "ActiveRecord save"),
        (r"\.update!?\s*\(", "model.update", "ActiveRecord update"),
        (r"\.destroy!?\b", "model.destroy", "ActiveRecord destroy"),
        (r"Rails\.logger\.", "Rails.logger", "Rails logger"),
        (r"\bputs\b|\bprint\b", "puts", "Standard output"),
        (r"HTTParty\.post\s*\(|Net::HTTP\.post\w*\s*\(", "HTTParty.post", "HTTP POST"),
    ],
    dependency=[
        (r"require\s+['\"]", "require", "Library require"),
        (r"require_relative\s+['\"]", "require_relative", "Relative file require"),
        (r"^\s*load\s+['\"]", "load", "Load Ruby file"),
        (r"^\s*(include|extend)\s+[A-Z]\w*", "include", "Module mixin"),
    ],
)

LUA = table(
    input=[
        (r"io\.open\s*\(", "io.open", "File open"),
        (r"io\.read\s*\(", "io.read", "Standard input read"),
        (r"io\.lines\s*\(", "io.lines", "Line iterator"),
        (r":read\s*\(", "file:read", "File handle read"),
        (r"\bloadfile\s*\(", "loadfile", "Load Lua chunk from file"),
        (r"\bdofile\s*\(", "dofile", "Execute Lua file"),
        (r"os\.getenv\s*\(", "os.getenv", "Environment variable"),
        (r"json\.decode\s*\(|cjson\.decode\s*\(", "json.decode", "JSON decoder"),
        (r"love\.filesystem\.read\s*\(|love\.filesystem\.lines\s*\(", "love.filesystem.read", "LOVE2D file read"),
    ],
    output=[
        (r"io\.write\s*\(", "io.write", "Standard output write"),
        (r":write\s*\(", "file:write", "File handle write"),
        (r"\bprint\s*\(", "print", "Console output"),
        (r"io\.output\s*\(", "io.output", "Default output file"),
        (r"json\.encode\s*\(|cjson\.encode\s*\(", "json.encode", "JSON encoder"),
        (r"love\.filesystem\.write\s*\(|love\.filesystem\.append\s*\(", "love.filesystem.write", "LOVE2D file write"),
        (r"os\.rename\s*\(|os\.remove\s*\(", "os.rename", "File system change"),
    ],
    dependency=[
        (r"\brequire\s*\(?\s*['\"]", "require", "Module require"),
        (r"\bdofile\s*\(", "dofile", "Execute Lua file"),
        (r"\bloadstring\s*\(|\bload\s*\(", "load", "Load chunk from string"),
        (r"package\.path", "package.path", "Module search path"),
    ],
)

WGSL = table(
    input=[
        (r"var\s*<\s*uniform\s*>", "var<uniform>", "Uniform buffer binding"),
        (r"var\s*<\s*storage\s*,\s*read\s*>|var\s*<\s*storage\s*>", "var<storage, read>", "Read-only storage buffer"),
        (r"texture_2d\s*<|texture_2d_array\s*<", "texture_2d", "2D texture binding"),
        (r"texture_3d\s*<", "texture_3d", "3D texture binding"),
        (r"texture_cube\s*<|texture_cube_array\s*<", "texture_cube", "Cube texture binding"),
        (r"texture_depth_\w+", "texture_depth", "Depth texture binding"),
        (r":\s*sampler\b|:\s*sampler_comparison\b", "sampler", "Sampler binding"),
        (r"textureSample\w*\s*\(", "textureSample", "Texture sampling"),
        (r"textureLoad\s*\(", "textureLoad", "Texel load"),
        (r"@location\s*\(\s*\d+\s*\)\s*\w+\s*:", "@location (input)", "Vertex/fragment input attribute"),
        (r"@builtin\s*\(\s*(vertex_index|instance_index|global_invocation_id|local_invocation_id|position)\s*\)\s*\w+\s*:", "@builtin (input)", "Built-in input value"),
    ],
    output=[
        (r"var\s*<\s*storage\s*,\s*read_write\s*>", "var<storage, read_write>", "Read-write storage buffer"),
        (r"texture_storage_\w+\s*<[^>]*write", "texture_storage (write)", "Writable storage texture"),
        (r"textureStore\s*\(", "textureStore", "Texel store"),
        (r"->\s*@location\s*\(\s*\d+\s*\)", "@location (output)", "Fragment/vertex output attribute"),
        (r"->\s*@builtin\s*\(\s*(position|frag_depth)\s*\)", "@builtin (output)", "Built-in output value"),
    ],
    dependency=[
        (r"^\s*#import\s+[\w:\"]+", "#import (naga-oil)", "naga-oil shader import"),
        (r"@import\s+", "@import", "Shader module import"),
        (r"^\s*#include\s+[\"<]", "#include", "Preprocessor include"),
    ],
)

# ---------- constructos de build (no cuentan como lenguajes de detección) ----------
MAKEFILE = table(
    input=[
        (r"^\s*-?include\s+(\S+)", "include", "Makefile include (reads another makefile)"),
        (r"\$\(wildcard\s+([^)]+)\)", "$(wildcard)", "File glob expansion"),
        (r"\$\(shell\s+cat\s+([^)]+)\)", "$(shell cat)", "File contents via shell"),
        (r"\$\(file\s+<\s*([^)]+)\)", "$(file <)", "GNU make file read"),
    ],
    output=[
        (r"^([A-Za-z0-9_./%$(){}-]+)\s*:(?!=)", "target rule", "Make target"),
        (r">\s*([^\s>;|&]+)", "> (output redirect)", "Recipe output redirection"),
        (r"^\s*install\s*:|\binstall\s+-[mdD]", "install", "Install target or command"),
    ],
    dependency=[
        (r"^\s*-?include\s+(\S+)", "include", "Makefile include"),
        (r"\$\(shell\s+([^)]+)\)", "$(shell)", "Shell command expansion"),
        (r"`([^`]+)`", "backtick command", "Backtick command substitution"),
    ],
)

DOCKERFILE = table(
    input=[
        (r"^\s*FROM\s+(\S+)", "FROM", "Base image"),
        (r"^\s*COPY\s+(?!--from)", "COPY", "Copy files from build context"),
        (r"^\s*ADD\s+", "ADD", "Add files or URLs"),
        (r"^\s*COPY\s+--from=(\S+)", "COPY --from", "Copy from another build stage"),
    ],
    output=[
        (r"^\s*EXPOSE\s+(\d+)", "EXPOSE", "Exposed port"),
        (r"^\s*VOLUME\s+", "VOLUME", "Volume mount point"),
        (r"^\s*ENTRYPOINT\s+", "ENTRYPOINT", "Container entrypoint"),
        (r"^\s*CMD\s+", "CMD", "Default container command"),
    ],
    dependency=[
        (r"^\s*RUN\s+.*\bpip3?\s+install", "RUN pip install", "Python package install"),
        (r"^\s*RUN\s+.*\bnpm\s+(install|ci)\b", "RUN npm install", "Node package install"),
        (r"^\s*RUN\s+.*apt-get\s+install", "RUN apt-get install", "System package install"),
        (r"^\s*RUN\s+R\s+-e", "RUN R -e", "R expression (package install)"),
        (r"^\s*RUN\s+", "RUN", "Build step"),
    ],
)
