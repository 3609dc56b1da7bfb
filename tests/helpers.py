"""Sample source files for wtv tests."""

ASSEMBLY_INFO = """\
using System.Reflection;
using System.Runtime.CompilerServices;
using System.Runtime.InteropServices;

// General Information about an assembly is controlled through the following
// set of attributes. Change these attribute values to modify the information
// associated with an assembly.
[assembly: AssemblyTitle("WhenTheVersion")]
[assembly: AssemblyDescription("")]
[assembly: AssemblyCompany("")]
[assembly: AssemblyProduct("WhenTheVersion")]
[assembly: AssemblyCopyright("Copyright ©  2017")]

// Version information for an assembly consists of the following four values:
//
//      Major Version
//      Minor Version
//      Build Number
//      Revision
//
// You can specify all the values or you can default the Build and Revision Numbers
// by using the '*' as shown below:
// [assembly: AssemblyVersion("1.0.*")]
[assembly: AssemblyVersion("1.0.0.15")]
[assembly: AssemblyFileVersion("1.0.0.15")]
"""

ASSEMBLY_INFO_WILDCARD = """\
using System.Reflection;

[assembly: AssemblyTitle("WhenTheVersion")]
[assembly: AssemblyVersion("1.0.0.*")]
"""

ASSEMBLY_INFO_BLOCK_COMMENTED = """\
/*
[assembly: AssemblyVersion("9.9.9.99")]
*/
[assembly: AssemblyVersion("1.0.0.15")] /* next build is 16 */
"""

ASSEMBLY_INFO_WITHOUT_VERSION = """\
using System.Reflection;

[assembly: AssemblyTitle("WhenTheVersion")]
[assembly: AssemblyProduct("WhenTheVersion")]
"""
